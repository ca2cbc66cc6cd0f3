"""
In-memory book collection.

The collection is an immutable tuple that is replaced on every successful
mutation, newest book first. Failed mutations leave the existing tuple in
place, so callers can detect changes by identity.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple

from .models import Book, IdGenerator, clean_field

logger = logging.getLogger(__name__)


class LibraryStore:
    """Ordered collection of books with add, remove, update and filter."""

    def __init__(self, books: Optional[List[Book]] = None, id_factory: Optional[Callable[[], int]] = None):
        self._books: Tuple[Book, ...] = self._clean_seed(books or ())
        self._next_id = id_factory or IdGenerator()

    @staticmethod
    def _clean_seed(books) -> Tuple[Book, ...]:
        """Trim seeded books, dropping blank records and repeated ids."""
        seen = set()
        kept = []
        for book in books:
            title, author = clean_field(book.title), clean_field(book.author)
            if not title or not author:
                logger.debug(f"Dropping seeded book {book.id}: blank title or author")
                continue
            if book.id in seen:
                logger.debug(f"Dropping seeded book {book.id}: duplicate id")
                continue
            seen.add(book.id)
            kept.append(Book(id=book.id, title=title, author=author))
        return tuple(kept)

    @property
    def books(self) -> Tuple[Book, ...]:
        return self._books

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def find(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def add(self, title: str, author: str) -> bool:
        """
        Prepend a new book.

        Returns:
            False without touching the collection when title or author is
            blank after trimming, True otherwise.
        """
        title, author = clean_field(title), clean_field(author)
        if not title or not author:
            logger.debug("Ignoring add with blank title or author")
            return False

        book = Book(id=self._next_id(), title=title, author=author)
        self._books = (book,) + self._books
        logger.debug(f"Added book {book.id}: {book}")
        return True

    def remove(self, book_id: int) -> bool:
        """Remove the book with ``book_id``. Returns False if there is none."""
        remaining = tuple(book for book in self._books if book.id != book_id)
        if len(remaining) == len(self._books):
            logger.debug(f"No book {book_id} to remove")
            return False

        self._books = remaining
        logger.debug(f"Removed book {book_id}")
        return True

    def update(self, book_id: int, title: str, author: str) -> bool:
        """
        Replace title and author of a book, keeping its id and position.

        Returns:
            False when either field is blank after trimming or no book has
            ``book_id``.
        """
        title, author = clean_field(title), clean_field(author)
        if not title or not author:
            logger.debug(f"Ignoring update of {book_id} with blank title or author")
            return False

        if self.find(book_id) is None:
            logger.debug(f"No book {book_id} to update")
            return False

        self._books = tuple(
            Book(id=book.id, title=title, author=author) if book.id == book_id else book
            for book in self._books
        )
        logger.debug(f"Updated book {book_id}: {title} by {author}")
        return True

    def filter(self, query: str) -> List[Book]:
        """Books whose title or author contains ``query``, ignoring case."""
        return [book for book in self._books if book.matches(query or "")]
