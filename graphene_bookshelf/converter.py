import graphene

from .batching import get_batch_resolver
from .resolvers import get_custom_resolver, get_relationship_resolver

"""
Flag for whether to generate stricter non-null fields for many-relationships.

Both the list element and the list field itself are non-null by default:
a many-relationship always resolves to a list (possibly empty) that never
contains None, e.g. ``books: [Book!]!`` on ``Author``.

This option can be set to False to generate ``books: [Book]`` instead.
"""
use_non_null_many_relationships = True


def set_non_null_many_relationships(non_null_flag):
    global use_non_null_many_relationships
    use_non_null_many_relationships = non_null_flag


def convert_relationship(relationship, obj_type, batching, field_name, **field_kwargs):
    """
    :param Relationship relationship:
    :param StoreObjectType obj_type:
    :param bool batching:
    :param str field_name:
    :param dict field_kwargs:
    :rtype: Dynamic
    """

    def dynamic_type():
        """:rtype: Field|None"""
        child_type = obj_type._meta.registry.get_type_for_model(relationship.model)

        if not child_type:
            return None

        resolver = get_custom_resolver(obj_type, field_name)
        if resolver is None:
            resolver = (
                get_batch_resolver(relationship)
                if batching
                else get_relationship_resolver(relationship)
            )

        if relationship.uselist:
            return _convert_to_many_relationship(child_type, resolver, **field_kwargs)
        return graphene.Field(child_type, resolver=resolver, **field_kwargs)

    return graphene.Dynamic(dynamic_type)


def _convert_to_many_relationship(child_type, resolver, **field_kwargs):
    list_type = (
        graphene.NonNull(graphene.List(graphene.NonNull(child_type)))
        if use_non_null_many_relationships
        else graphene.List(child_type)
    )
    return graphene.Field(list_type, resolver=resolver, **field_kwargs)
