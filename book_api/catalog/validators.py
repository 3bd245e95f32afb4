"""
Field rules for candidate books.

``validate_book()`` collects every violation in a raw JSON payload
instead of stopping at the first one, so clients can fix all of them in
a single round trip. ``clean_candidate()`` then turns a payload that
passed validation into trimmed, typed values ready for ``BookCreate`` or
``BookUpdate``.

Coercion is explicit: a year is either an integer (or a string of
digits) or it is rejected. Nothing silently becomes ``NaN``, ``0`` or
``False``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional

MIN_YEAR = 1000

TITLE_REQUIRED = "Title is required"
AUTHOR_REQUIRED = "Author is required"
YEAR_INVALID = "Year must be a valid year between 1000 and current year"

BOOK_FIELDS = ("title", "author", "year", "genre", "isbn", "available")


def parse_year(value: Any) -> Optional[int]:
    """Coerce a payload year into an ``int``.

    ``None`` means "no year". Integers, integral floats (``1965.0``) and
    digit strings (``" 1965 "``) are accepted; anything else raises
    ``ValueError``. Range checks are left to ``validate_book()``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"not a year: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"not a year: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if text.isdecimal():
            return int(text)
    raise ValueError(f"not a year: {value!r}")


def _check_required_text(candidate: Mapping[str, Any], field: str, required_msg: str) -> Optional[str]:
    value = candidate.get(field)
    if value is None:
        return required_msg
    if not isinstance(value, str):
        return f"{field.capitalize()} must be a string"
    if not value.strip():
        return required_msg
    return None


def validate_book(candidate: Mapping[str, Any], current_year: Optional[int] = None) -> List[str]:
    """Return the list of rule violations for ``candidate``.

    An empty list means the candidate is valid. The current year is read
    at call time unless ``current_year`` is given.
    """
    if current_year is None:
        current_year = date.today().year

    errors: List[str] = []

    for field, message in (("title", TITLE_REQUIRED), ("author", AUTHOR_REQUIRED)):
        error = _check_required_text(candidate, field, message)
        if error:
            errors.append(error)

    if candidate.get("year") is not None:
        try:
            year = parse_year(candidate["year"])
        except ValueError:
            errors.append(YEAR_INVALID)
        else:
            if year < MIN_YEAR or year > current_year:
                errors.append(YEAR_INVALID)

    genre = candidate.get("genre")
    if genre is not None and not isinstance(genre, str):
        errors.append("Genre must be a string")

    isbn = candidate.get("isbn")
    if isbn is not None and not isinstance(isbn, str):
        errors.append("ISBN must be a string")

    available = candidate.get("available")
    if available is not None and not isinstance(available, bool):
        errors.append("Available must be a boolean")

    return errors


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def clean_candidate(candidate: Mapping[str, Any]) -> Dict[str, Any]:
    """Trim and type the recognised fields present in ``candidate``.

    Only call this on a payload that passed ``validate_book()``. Keys the
    client did not send stay absent, which is what lets an update touch
    only the fields it names. ``available: null`` counts as not sent;
    empty ``genre``/``isbn`` clear the field.
    """
    cleaned: Dict[str, Any] = {}
    for field in BOOK_FIELDS:
        if field not in candidate:
            continue
        value = candidate[field]
        if field in ("title", "author"):
            cleaned[field] = value.strip()
        elif field == "year":
            cleaned[field] = parse_year(value)
        elif field in ("genre", "isbn"):
            cleaned[field] = _optional_text(value)
        elif value is not None:
            cleaned[field] = value
    return cleaned
