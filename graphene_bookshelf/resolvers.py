from graphene.utils.get_unbound_function import get_unbound_function

from .utils import get_store


def get_custom_resolver(obj_type, field_name):
    """
    Since `graphene` will call `resolve_<field_name>` on a field only if it
    does not have a `resolver`, we need to re-implement that logic here so
    users are able to override the default resolvers that we provide.
    """
    resolver = getattr(obj_type, "resolve_{}".format(field_name), None)
    if resolver:
        return get_unbound_function(resolver)

    return None


def get_relationship_resolver(relationship):
    """
    Resolve the relationship of a single entity against the store found in
    the execution context. Nothing is cached, every call reads the store.

    :param Relationship relationship:
    :rtype: Callable
    """

    def resolve(root, info, **args):
        return relationship.resolver(get_store(info.context), root)

    return resolve
