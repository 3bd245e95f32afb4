"""Listing filters for ``GET /books``."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import Book
from .schemas import FilterCriteria


def _norm(s: Optional[str]) -> str:
    """Lowercase ``s`` for case-insensitive matching; ``None`` becomes ``""``."""
    return (s or "").lower()


def parse_available(value: Optional[str]) -> Optional[bool]:
    """Read the ``available`` query parameter.

    Absent means no constraint. ``"true"`` in any case is ``True`` and
    every other value, including the empty string, is ``False``.
    """
    if value is None:
        return None
    return value.lower() == "true"


def apply_filters(books: Iterable[Book], criteria: Optional[FilterCriteria] = None) -> List[Book]:
    """Return the books matching every supplied criterion, in input order.

    ``author``/``genre`` are substring matches on that field, ``search``
    matches title or author. A book without a genre never matches a
    genre filter.
    """
    items = list(books)
    if criteria is None:
        return items

    nauthor = _norm(criteria.author)
    ngenre = _norm(criteria.genre)
    nsearch = _norm(criteria.search)

    if nauthor:
        items = [b for b in items if nauthor in _norm(b.author)]

    if ngenre:
        items = [b for b in items if b.genre and ngenre in _norm(b.genre)]

    if criteria.available is not None:
        items = [b for b in items if b.available is criteria.available]

    if nsearch:
        items = [b for b in items if nsearch in _norm(b.title) or nsearch in _norm(b.author)]

    return items
