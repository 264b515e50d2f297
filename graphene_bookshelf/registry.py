from collections import defaultdict


class Registry(object):
    def __init__(self):
        self._registry = {}
        self._registry_relationships = defaultdict(dict)

    def register(self, obj_type):
        from .types import StoreObjectType

        if not isinstance(obj_type, type) or not issubclass(obj_type, StoreObjectType):
            raise TypeError("Expected StoreObjectType, but got: {!r}".format(obj_type))
        assert obj_type._meta.registry == self, "Registry for a Model have to match."
        self._registry[obj_type._meta.model] = obj_type

    def get_type_for_model(self, model):
        return self._registry.get(model)

    def register_relationship(self, obj_type, field_name, relationship):
        from .types import StoreObjectType

        if not isinstance(obj_type, type) or not issubclass(obj_type, StoreObjectType):
            raise TypeError("Expected StoreObjectType, but got: {!r}".format(obj_type))
        if not field_name or not isinstance(field_name, str):
            raise TypeError("Expected a field name, but got: {!r}".format(field_name))
        self._registry_relationships[obj_type][field_name] = relationship

    def get_relationship_for_field(self, obj_type, field_name):
        return self._registry_relationships.get(obj_type, {}).get(field_name)


registry = None


def get_global_registry():
    global registry
    if not registry:
        registry = Registry()
    return registry


def reset_global_registry():
    global registry
    registry = None
