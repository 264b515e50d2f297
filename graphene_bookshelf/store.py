import logging
import threading
from collections import defaultdict
from typing import Iterable, List, Optional

from . import data
from .models import Author, Book

log = logging.getLogger(__name__)


def _next_id(records):
    """Return the id following the highest numeric id in ``records``."""
    numeric_ids = [int(record.id) for record in records if str(record.id).isdigit()]
    return max(numeric_ids, default=0) + 1


class Store(object):
    """
    In-memory collection of authors and books.

    The sequences are kept in insertion order, which is also the order in
    which they are listed. Lookups return the stored objects themselves.

    New ids come from per-collection counters that only move forward, so an
    id is never handed out twice, even after a book has been removed.
    Every write goes through a single writer lock.
    """

    def __init__(
        self,
        authors: Optional[Iterable[Author]] = None,
        books: Optional[Iterable[Book]] = None,
        seed: bool = True,
    ):
        if authors is None and books is None and seed:
            authors = [Author(**item) for item in data.authors["data"]]
            books = [Book(**item) for item in data.books["data"]]

        self.authors: List[Author] = list(authors or [])
        self.books: List[Book] = list(books or [])
        self._next_author_id = _next_id(self.authors)
        self._next_book_id = _next_id(self.books)
        self._write_lock = threading.RLock()

    def write_lock(self):
        """
        The writer lock, for callers that read and then write in one step.

        It is re-entrant, so the store's own writes can run while it is held.
        """
        return self._write_lock

    # Lookups

    def find_author_by_id(self, author_id) -> Optional[Author]:
        return next((a for a in self.authors if a.id == author_id), None)

    def find_author_by_name(self, name) -> Optional[Author]:
        return next((a for a in self.authors if a.name == name), None)

    def find_book_by_id(self, book_id) -> Optional[Book]:
        return next((b for b in self.books if b.id == book_id), None)

    def find_books_by_author_id(self, author_id) -> List[Book]:
        return [book for book in self.books if book.author_id == author_id]

    def find_authors_by_ids(self, author_ids) -> List[Optional[Author]]:
        """Batch version of :meth:`find_author_by_id`, done in a single scan."""
        by_id = {}
        wanted = set(author_ids)
        for author in self.authors:
            if author.id in wanted and author.id not in by_id:
                by_id[author.id] = author
        return [by_id.get(author_id) for author_id in author_ids]

    def find_books_by_author_ids(self, author_ids) -> List[List[Book]]:
        """Batch version of :meth:`find_books_by_author_id`, done in a single scan."""
        by_author = defaultdict(list)
        wanted = set(author_ids)
        for book in self.books:
            if book.author_id in wanted:
                by_author[book.author_id].append(book)
        return [list(by_author.get(author_id, [])) for author_id in author_ids]

    # Writes

    def append_author(self, name) -> Author:
        with self._write_lock:
            author = Author(id=str(self._next_author_id), name=name)
            self._next_author_id += 1
            self.authors.append(author)
        log.debug("Created author %s (%r)", author.id, author.name)
        return author

    def append_book(self, title, author_id, published_year) -> Book:
        with self._write_lock:
            book = Book(
                id=str(self._next_book_id),
                title=title,
                author_id=author_id,
                published_year=published_year,
            )
            self._next_book_id += 1
            self.books.append(book)
        log.debug("Created book %s (%r)", book.id, book.title)
        return book

    def replace_book(self, book: Book) -> Optional[Book]:
        """Swap the stored book having ``book.id`` for ``book``, keeping its position."""
        with self._write_lock:
            for index, stored in enumerate(self.books):
                if stored.id == book.id:
                    self.books[index] = book
                    break
            else:
                return None
        log.debug("Replaced book %s", book.id)
        return book

    def remove_book_by_id(self, book_id) -> bool:
        with self._write_lock:
            for index, book in enumerate(self.books):
                if book.id == book_id:
                    del self.books[index]
                    break
            else:
                return False
        log.debug("Removed book %s", book_id)
        return True
