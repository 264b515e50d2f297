import pytest

import graphene

from .. import operations
from ..converter import set_non_null_many_relationships
from ..models import Author, Book
from ..registry import Registry, get_global_registry
from ..types import Relationship, StoreObjectType, StoreObjectTypeOptions
from ..utils import get_store


@pytest.fixture
def nullable_many_relationships():
    set_non_null_many_relationships(False)
    yield
    set_non_null_many_relationships(True)


def make_types():
    class AuthorType(StoreObjectType):
        class Meta:
            model = Author

        id = graphene.ID(required=True)
        name = graphene.String()
        books = Relationship(
            Book, resolver=operations.resolve_author_books, uselist=True
        )

    class BookType(StoreObjectType):
        class Meta:
            model = Book

        id = graphene.ID(required=True)
        title = graphene.String()
        author = Relationship(Author, resolver=operations.resolve_book_author)

    return AuthorType, BookType


def test_store_objecttype_registered():
    AuthorType, BookType = make_types()
    assert issubclass(AuthorType, graphene.ObjectType)
    assert isinstance(AuthorType._meta, StoreObjectTypeOptions)
    assert AuthorType._meta.model == Author
    assert AuthorType._meta.batching is False
    assert get_global_registry().get_type_for_model(Author) is AuthorType
    assert get_global_registry().get_type_for_model(Book) is BookType


def test_objecttype_fields():
    AuthorType, BookType = make_types()
    assert list(AuthorType._meta.fields.keys()) == ["books", "id", "name"]
    assert list(BookType._meta.fields.keys()) == ["author", "id", "title"]
    assert isinstance(AuthorType._meta.fields["books"], graphene.Dynamic)


def test_relationship_registered():
    AuthorType, _ = make_types()
    relationship = get_global_registry().get_relationship_for_field(AuthorType, "books")
    assert isinstance(relationship, Relationship)
    assert relationship.model is Book
    assert relationship.uselist is True


def test_objecttype_with_custom_registry():
    reg = Registry()

    class AuthorType(StoreObjectType):
        class Meta:
            model = Author
            registry = reg

        name = graphene.String()

    assert AuthorType._meta.registry is reg
    assert reg.get_type_for_model(Author) is AuthorType
    assert get_global_registry().get_type_for_model(Author) is None


def test_objecttype_skip_registry():
    class AuthorType(StoreObjectType):
        class Meta:
            model = Author
            skip_registry = True

        name = graphene.String()

    assert get_global_registry().get_type_for_model(Author) is None


def test_objecttype_requires_model():
    re_err = "You need to pass a valid Model in AuthorType.Meta"
    with pytest.raises(AssertionError, match=re_err):

        class AuthorType(StoreObjectType):
            class Meta:
                model = dict


def test_objecttype_requires_registry_instance():
    re_err = "The attribute registry in AuthorType needs to be an instance of Registry"
    with pytest.raises(AssertionError, match=re_err):

        class AuthorType(StoreObjectType):
            class Meta:
                model = Author
                registry = object()


def test_relationship_requires_model():
    re_err = 'Cannot map Relationship "books" to a model'
    with pytest.raises(Exception, match=re_err):

        class AuthorType(StoreObjectType):
            class Meta:
                model = Author

            books = Relationship("Book", resolver=operations.resolve_author_books)


def test_relationship_to_unregistered_model_is_skipped():
    class AuthorType(StoreObjectType):
        class Meta:
            model = Author

        name = graphene.String()
        books = Relationship(
            Book, resolver=operations.resolve_author_books, uselist=True
        )

    class Query(graphene.ObjectType):
        authors = graphene.List(AuthorType)

        def resolve_authors(self, info):
            return get_store(info.context).authors

    schema = graphene.Schema(query=Query)
    assert "books" not in str(schema)


def test_relationship_field_types():
    AuthorType, BookType = make_types()

    class Query(graphene.ObjectType):
        authors = graphene.List(AuthorType)
        books = graphene.List(BookType)

    sdl = str(graphene.Schema(query=Query))
    assert "books: [BookType!]!" in sdl
    assert "author: AuthorType" in sdl


def test_nullable_many_relationships(nullable_many_relationships):
    AuthorType, _ = make_types()

    class Query(graphene.ObjectType):
        authors = graphene.List(AuthorType)

    sdl = str(graphene.Schema(query=Query))
    assert "books: [BookType]\n" in sdl


def test_relationship_field_description():
    class AuthorType(StoreObjectType):
        class Meta:
            model = Author

        books = Relationship(
            Book,
            resolver=operations.resolve_author_books,
            uselist=True,
            description="All the books.",
        )

    class BookType(StoreObjectType):
        class Meta:
            model = Book

        title = graphene.String()

    field = AuthorType._meta.fields["books"].get_type()
    assert field.description == "All the books."


def test_custom_relationship_resolver(context):
    class AuthorType(StoreObjectType):
        class Meta:
            model = Author

        name = graphene.String()
        books = Relationship(
            Book, resolver=operations.resolve_author_books, uselist=True
        )

        def resolve_books(root, info):
            return get_store(info.context).find_books_by_author_id(root.id)[-1:]

    class BookType(StoreObjectType):
        class Meta:
            model = Book

        title = graphene.String()

    class Query(graphene.ObjectType):
        author = graphene.Field(AuthorType, id=graphene.ID())

        def resolve_author(self, info, id):
            return operations.get_author(get_store(info.context), id)

    schema = graphene.Schema(query=Query)
    result = schema.execute(
        'query { author(id: "1") { name books { title } } }', context_value=context
    )
    assert not result.errors
    assert result.data == {
        "author": {
            "name": "J.K. Rowling",
            "books": [{"title": "Harry Potter and the Chamber of Secrets"}],
        }
    }


def test_is_type_of(store):
    AuthorType, BookType = make_types()
    assert AuthorType.is_type_of(store.authors[0], None) is True
    assert AuthorType.is_type_of(store.books[0], None) is False
    assert BookType.is_type_of(store.books[0], None) is True


def test_is_type_of_rejects_incompatible_instance(context):
    AuthorType, _ = make_types()

    class Query(graphene.ObjectType):
        author = graphene.Field(AuthorType)

        def resolve_author(self, info):
            return {"id": "1", "name": "J.K. Rowling"}

    schema = graphene.Schema(query=Query)
    result = schema.execute("query { author { name } }", context_value=context)
    assert result.errors
    assert "Received incompatible instance" in str(result.errors[0])
