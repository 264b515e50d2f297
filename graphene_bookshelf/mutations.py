from graphene import ID, Boolean, Field, Int, Mutation, NonNull, String

from . import operations
from .utils import get_store


class StoreMutation(Mutation):
    class Meta:
        abstract = True

    @classmethod
    def Field(cls, *args, **kwargs):
        return Field(
            cls._meta.output,
            # Arguments are collected alphabetically, keep declaration order
            args=dict(sorted(cls._meta.arguments.items(), key=lambda item: item[1])),
            resolver=cls._meta.resolver,
            description=cls._meta.description,
            **kwargs
        )


class AddBook(StoreMutation):
    """Add a book, creating its author when no author has that exact name."""

    class Meta:
        abstract = True

    class Arguments:
        title = String(required=True)
        author = String(required=True)
        published_year = Int(required=True)

    @classmethod
    def mutate(cls, self, info, title, author, published_year):
        store = get_store(info.context)
        return operations.add_book(store, title, author, published_year)


class UpdateBook(StoreMutation):
    """Update the given fields of a book. Returns null when there is no such book."""

    class Meta:
        abstract = True

    class Arguments:
        id = ID(required=True)
        title = String()
        author = String()
        published_year = Int()

    @classmethod
    def mutate(cls, self, info, id, title=None, author=None, published_year=None):
        store = get_store(info.context)
        return operations.update_book(
            store,
            id,
            title=title,
            author_name=author,
            published_year=published_year,
        )


class DeleteBook(StoreMutation):
    """Delete a book. Returns whether a book was removed."""

    class Meta:
        abstract = True

    class Arguments:
        id = ID(required=True)

    @classmethod
    def mutate(cls, self, info, id):
        return operations.delete_book(get_store(info.context), id)


def add_book(of_type):
    class AddBookModel(AddBook):
        class Meta:
            description = AddBook.__doc__

        Output = NonNull(of_type)

    return AddBookModel.Field()


def update_book(of_type):
    class UpdateBookModel(UpdateBook):
        class Meta:
            description = UpdateBook.__doc__

        Output = of_type

    return UpdateBookModel.Field()


def delete_book():
    class DeleteBookModel(DeleteBook):
        class Meta:
            description = DeleteBook.__doc__

        Output = NonNull(Boolean)

    return DeleteBookModel.Field()
