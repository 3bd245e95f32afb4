from typing import Dict, Iterable

from ..models import Book
from .schemas import BookStats


def compute_stats(books: Iterable[Book]) -> BookStats:
    """Count books by availability and build the genre histogram.

    Books without a genre are counted in the totals only.
    """
    total = available = 0
    genres: Dict[str, int] = {}
    for book in books:
        total += 1
        if book.available:
            available += 1
        if book.genre:
            genres[book.genre] = genres.get(book.genre, 0) + 1

    return BookStats(
        total_books=total,
        available_books=available,
        unavailable_books=total - available,
        genre_distribution=genres,
    )
