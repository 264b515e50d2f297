from collections import OrderedDict

from graphene import Field
from graphene.types.objecttype import ObjectType, ObjectTypeOptions
from graphene.types.utils import yank_fields_from_attrs
from graphene.utils.orderedtype import OrderedType

from .converter import convert_relationship
from .registry import Registry, get_global_registry
from .utils import is_model_class, is_model_instance


class Relationship(OrderedType):
    """
    Declares a field resolving the entities related to the parent entity.

    ``resolver(store, parent)`` returns the related entity (or the list of
    them when ``uselist`` is set). ``batch_resolver(store, parents)`` returns
    one such result per parent and is used when batching is enabled; it
    defaults to calling ``resolver`` for each parent.
    """

    def __init__(
        self,
        model,
        resolver,
        batch_resolver=None,
        uselist=False,
        batching=None,
        description=None,
        deprecation_reason=None,
        required=None,
        _creation_counter=None,
        **field_kwargs
    ):
        super(Relationship, self).__init__(_creation_counter=_creation_counter)
        self.model = model
        self.resolver = resolver
        self.batch_resolver = batch_resolver or self._resolve_each
        self.uselist = uselist
        self.batching = batching
        common_kwargs = {
            "description": description,
            "deprecation_reason": deprecation_reason,
            "required": required,
        }
        common_kwargs = {kwarg: value for kwarg, value in common_kwargs.items() if value is not None}
        self.kwargs = field_kwargs
        self.kwargs.update(common_kwargs)

    def _resolve_each(self, store, parents):
        return [self.resolver(store, parent) for parent in parents]


def construct_fields(obj_type, registry, batching):
    relationship_items = []
    for attname, value in list(obj_type.__dict__.items()):
        if isinstance(value, Relationship):
            relationship_items.append((attname, value))
    relationship_items = sorted(relationship_items, key=lambda item: item[1])

    fields = OrderedDict()
    for field_name, relationship in relationship_items:
        if not is_model_class(relationship.model):
            raise Exception(
                'Cannot map Relationship "{}" to a model, received "{}"'.format(
                    field_name, relationship.model
                )
            )
        field_batching = batching if relationship.batching is None else relationship.batching
        field = convert_relationship(
            relationship, obj_type, field_batching, field_name, **relationship.kwargs
        )
        registry.register_relationship(obj_type, field_name, relationship)
        fields[field_name] = field

    return fields


class StoreObjectTypeOptions(ObjectTypeOptions):
    model = None  # type: Model
    registry = None  # type: Registry
    batching = False  # type: bool


class StoreObjectType(ObjectType):
    @classmethod
    def __init_subclass_with_meta__(
        cls,
        model=None,
        registry=None,
        skip_registry=False,
        batching=False,
        _meta=None,
        **options
    ):
        assert is_model_class(model), (
            "You need to pass a valid Model in " '{}.Meta, received "{}".'
        ).format(cls.__name__, model)

        if not registry:
            registry = get_global_registry()

        assert isinstance(registry, Registry), (
            "The attribute registry in {} needs to be an instance of "
            'Registry, received "{}".'
        ).format(cls.__name__, registry)

        relationship_fields = yank_fields_from_attrs(
            construct_fields(obj_type=cls, registry=registry, batching=batching),
            _as=Field,
            sort=False,
        )

        if not _meta:
            _meta = StoreObjectTypeOptions(cls)

        _meta.model = model
        _meta.registry = registry
        _meta.batching = batching

        if _meta.fields:
            _meta.fields.update(relationship_fields)
        else:
            _meta.fields = relationship_fields

        super(StoreObjectType, cls).__init_subclass_with_meta__(
            _meta=_meta, **options
        )

        if not skip_registry:
            registry.register(cls)

    @classmethod
    def is_type_of(cls, root, info):
        if isinstance(root, cls):
            return True
        if not is_model_instance(root):
            raise Exception(('Received incompatible instance "{}".').format(root))
        return isinstance(root, cls._meta.model)
