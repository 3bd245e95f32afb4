# book_api/storage.py
import logging
import threading
from typing import Any, Iterable, List, Optional

from .errors import ConflictError, NotFoundError
from .models import Book, BookCreate, BookUpdate

logger = logging.getLogger(__name__)


SAMPLE_BOOKS: List[dict] = [
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "year": 1925,
        "genre": "Classic Literature",
        "isbn": "978-0-7432-7356-5",
        "available": True,
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "year": 1960,
        "genre": "Fiction",
        "isbn": "978-0-06-112008-4",
        "available": True,
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "year": 1949,
        "genre": "Dystopian Fiction",
        "isbn": "978-0-452-28423-4",
        "available": False,
    },
]


def parse_book_id(book_id: Any) -> Optional[int]:
    """Turn a path parameter into a book id, or ``None`` if it is not one."""
    if isinstance(book_id, bool):
        return None
    if isinstance(book_id, int):
        return book_id
    text = str(book_id).strip()
    if not text.isdecimal():
        return None
    try:
        return int(text)
    except ValueError:
        # Too many digits for int(); no book can have that id.
        return None


class BookStore:
    """In-memory collection of books plus the id counter.

    ``lock`` is re-entrant: handlers hold it around a read-validate-write
    sequence while the store methods they call take it again.
    """

    def __init__(self, books: Iterable[BookCreate] = ()):
        self._books: List[Book] = []
        self._next_id = 1
        self.lock = threading.RLock()
        for candidate in books:
            self.insert(candidate)

    @classmethod
    def with_sample_books(cls) -> "BookStore":
        return cls(BookCreate(**entry) for entry in SAMPLE_BOOKS)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._books)

    def list(self) -> List[Book]:
        with self.lock:
            return list(self._books)

    def find_by_id(self, book_id: Any) -> Optional[Book]:
        parsed = parse_book_id(book_id)
        if parsed is None:
            return None
        with self.lock:
            return next((b for b in self._books if b.id == parsed), None)

    def get(self, book_id: Any) -> Book:
        book = self.find_by_id(book_id)
        if book is None:
            raise NotFoundError(book_id)
        return book

    def isbn_taken(self, isbn: Optional[str], exclude_id: Optional[int] = None) -> bool:
        if not isbn:
            return False
        with self.lock:
            return any(b.isbn == isbn and b.id != exclude_id for b in self._books)

    def insert(self, candidate: BookCreate) -> Book:
        with self.lock:
            if self.isbn_taken(candidate.isbn):
                raise ConflictError(candidate.isbn)
            book = Book(id=self._next_id, **candidate.model_dump())
            self._next_id += 1
            self._books.append(book)
        logger.info("Created book %s (%s)", book.id, book.title)
        return book

    def update(self, book_id: Any, patch: BookUpdate) -> Book:
        changes = patch.model_dump(exclude_unset=True)
        with self.lock:
            book = self.get(book_id)
            new_isbn = changes.get("isbn")
            if new_isbn and new_isbn != book.isbn and self.isbn_taken(new_isbn, exclude_id=book.id):
                raise ConflictError(new_isbn)
            # Swap in a new record so readers never see a half-applied update.
            book = book.model_copy(update=changes)
            index = next(i for i, b in enumerate(self._books) if b.id == book.id)
            self._books[index] = book
        logger.info("Updated book %s: %s", book.id, ", ".join(sorted(changes)) or "no changes")
        return book

    def delete(self, book_id: Any) -> Book:
        parsed = parse_book_id(book_id)
        with self.lock:
            for index, book in enumerate(self._books):
                if book.id == parsed:
                    del self._books[index]
                    break
            else:
                raise NotFoundError(book_id)
        logger.info("Deleted book %s (%s)", book.id, book.title)
        return book
