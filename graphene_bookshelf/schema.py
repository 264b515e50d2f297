import graphene

from . import mutations, operations
from .models import Author as AuthorModel
from .models import Book as BookModel
from .types import Relationship, StoreObjectType
from .utils import get_store


class Author(StoreObjectType):
    class Meta:
        model = AuthorModel
        description = "An author of `Book`s."

    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    books = Relationship(
        BookModel,
        resolver=operations.resolve_author_books,
        batch_resolver=operations.resolve_books_for_authors,
        uselist=True,
        description="Books written by this author, in store order.",
    )


class Book(StoreObjectType):
    class Meta:
        model = BookModel
        description = "A book written by an `Author`."

    id = graphene.ID(required=True)
    title = graphene.String(required=True)
    author_id = graphene.ID(required=True)
    published_year = graphene.Int(required=True)
    author = Relationship(
        AuthorModel,
        resolver=operations.resolve_book_author,
        batch_resolver=operations.resolve_authors_for_books,
    )


class Query(graphene.ObjectType):
    books = graphene.NonNull(graphene.List(graphene.NonNull(Book)))
    book = graphene.Field(Book, id=graphene.ID(required=True))
    authors = graphene.NonNull(graphene.List(graphene.NonNull(Author)))
    author = graphene.Field(Author, id=graphene.ID(required=True))

    def resolve_books(self, info):
        return operations.list_books(get_store(info.context))

    def resolve_book(self, info, id):
        return operations.get_book(get_store(info.context), id)

    def resolve_authors(self, info):
        return operations.list_authors(get_store(info.context))

    def resolve_author(self, info, id):
        return operations.get_author(get_store(info.context), id)


class Mutation(graphene.ObjectType):
    add_book = mutations.add_book(Book)
    update_book = mutations.update_book(Book)
    delete_book = mutations.delete_book()


schema = graphene.Schema(query=Query, mutation=Mutation)
