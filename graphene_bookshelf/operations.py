"""
Queries, mutations and relationship resolution over a :class:`Store`.

Every function takes the store it works on as its first argument. Missing
entities are reported as ``None`` (or ``False`` for deletions), never raised.
"""
from .models import Book


# Relationships


def resolve_author_books(store, author):
    return store.find_books_by_author_id(author.id)


def resolve_book_author(store, book):
    return store.find_author_by_id(book.author_id)


def resolve_books_for_authors(store, authors):
    return store.find_books_by_author_ids([author.id for author in authors])


def resolve_authors_for_books(store, books):
    return store.find_authors_by_ids([book.author_id for book in books])


# Queries


def list_books(store):
    return store.books


def get_book(store, book_id):
    return store.find_book_by_id(book_id)


def list_authors(store):
    return store.authors


def get_author(store, author_id):
    return store.find_author_by_id(author_id)


# Mutations


def get_or_create_author(store, name):
    """Return the author called exactly ``name``, creating it if there is none."""
    with store.write_lock():
        author = store.find_author_by_name(name)
        if author is None:
            author = store.append_author(name)
        return author


def add_book(store, title, author_name, published_year):
    with store.write_lock():
        author = get_or_create_author(store, author_name)
        return store.append_book(
            title=title, author_id=author.id, published_year=published_year
        )


def update_book(store, book_id, title=None, author_name=None, published_year=None):
    """
    Merge the given values into the book ``book_id`` and store the result.

    An empty ``title`` or ``author_name`` leaves the current value in place.
    ``published_year`` is applied whenever it is not ``None``, so ``0`` is a
    valid new year.
    """
    with store.write_lock():
        book = store.find_book_by_id(book_id)
        if book is None:
            return None

        author_id = book.author_id
        if author_name:
            author_id = get_or_create_author(store, author_name).id

        updated = Book(
            id=book.id,
            title=title or book.title,
            author_id=author_id,
            published_year=(
                published_year if published_year is not None else book.published_year
            ),
        )
        return store.replace_book(updated)


def delete_book(store, book_id):
    return store.remove_book_by_id(book_id)
