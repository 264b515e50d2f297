class Model(object):
    """Base class for the entities kept in a :class:`~graphene_bookshelf.store.Store`."""

    __fields__ = ()

    def __init__(self, **kwargs):
        for key in self.__fields__:
            setattr(self, key, kwargs.pop(key, None))
        if kwargs:
            raise TypeError(
                "{}() got unexpected fields: {}".format(
                    self.__class__.__name__, ", ".join(sorted(kwargs))
                )
            )

    def to_dict(self):
        return {key: getattr(self, key) for key in self.__fields__}

    def __repr__(self):
        return "{}({})".format(
            self.__class__.__name__,
            ", ".join("{}={!r}".format(k, v) for k, v in self.to_dict().items()),
        )


class Author(Model):
    __fields__ = ("id", "name")


class Book(Model):
    __fields__ = ("id", "title", "author_id", "published_year")
