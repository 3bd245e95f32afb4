"""
Tests for the candidate book field rules.
"""

import pytest

from book_api.catalog.validators import (
    AUTHOR_REQUIRED,
    TITLE_REQUIRED,
    YEAR_INVALID,
    clean_candidate,
    parse_year,
    validate_book,
)


def test_valid_candidate_has_no_errors():
    """A complete, well-formed candidate passes."""
    candidate = {
        "title": "Dune",
        "author": "Frank Herbert",
        "year": 1965,
        "genre": "Science Fiction",
        "isbn": "978-0441013593",
        "available": False,
    }
    assert validate_book(candidate, current_year=2024) == []


def test_minimal_candidate_is_valid():
    assert validate_book({"title": "Dune", "author": "Frank Herbert"}) == []


@pytest.mark.parametrize("title", [None, "", "   "])
def test_title_required(title):
    candidate = {"author": "Someone"}
    if title is not None:
        candidate["title"] = title
    assert validate_book(candidate) == [TITLE_REQUIRED]


def test_all_violations_are_collected():
    """Missing title, missing author and a bad year are all reported together."""
    errors = validate_book({"year": 999}, current_year=2024)
    assert errors == [TITLE_REQUIRED, AUTHOR_REQUIRED, YEAR_INVALID]


@pytest.mark.parametrize("year", [999, 2025, "abc", "", True, 1965.5])
def test_invalid_years(year):
    errors = validate_book({"title": "T", "author": "A", "year": year}, current_year=2024)
    assert errors == [YEAR_INVALID]


@pytest.mark.parametrize("year", [1000, 2024, "1965", 1965.0, None])
def test_valid_years(year):
    assert validate_book({"title": "T", "author": "A", "year": year}, current_year=2024) == []


def test_current_year_is_read_at_call_time():
    from datetime import date

    this_year = date.today().year
    assert validate_book({"title": "T", "author": "A", "year": this_year}) == []
    assert validate_book({"title": "T", "author": "A", "year": this_year + 1}) == [YEAR_INVALID]


def test_type_errors():
    errors = validate_book(
        {"title": 42, "author": "A", "genre": 7, "isbn": 123, "available": "yes"}
    )
    assert errors == [
        "Title must be a string",
        "Genre must be a string",
        "ISBN must be a string",
        "Available must be a boolean",
    ]


def test_parse_year():
    assert parse_year(None) is None
    assert parse_year(1965) == 1965
    assert parse_year(" 1965 ") == 1965
    assert parse_year(1965.0) == 1965
    for bad in ("nineteen", "", "19.5", False, 19.5, [1965]):
        with pytest.raises(ValueError):
            parse_year(bad)


def test_clean_candidate_trims_and_types():
    cleaned = clean_candidate(
        {
            "title": "  Dune  ",
            "author": " Frank Herbert ",
            "year": "1965",
            "genre": "  ",
            "isbn": " 123 ",
            "id": 99,
        }
    )
    assert cleaned == {
        "title": "Dune",
        "author": "Frank Herbert",
        "year": 1965,
        "genre": None,
        "isbn": "123",
    }


def test_clean_candidate_keeps_only_sent_fields():
    assert clean_candidate({"genre": "Drama"}) == {"genre": "Drama"}
    assert clean_candidate({"available": None}) == {}
    assert clean_candidate({"available": False}) == {"available": False}
    assert clean_candidate({"year": None}) == {"year": None}
