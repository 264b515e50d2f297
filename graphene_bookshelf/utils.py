from .models import Model


def get_store(context):
    store = context.get("store") if context else None
    if store is None:
        raise Exception(
            "A store in the execution context is required for querying.\n"
            'Pass it with `schema.execute(query, context_value={"store": store})`.'
        )
    return store


def is_model_class(cls):
    return isinstance(cls, type) and issubclass(cls, Model) and cls is not Model


def is_model_instance(obj):
    return isinstance(obj, Model)
