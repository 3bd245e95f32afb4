"""
Tests for the listing filters.
"""

from book_api.catalog.filters import apply_filters, parse_available
from book_api.catalog.schemas import FilterCriteria


def ids(books):
    return [b.id for b in books]


def test_no_criteria_is_identity(sample_books):
    assert apply_filters(sample_books) == sample_books
    assert apply_filters(sample_books, FilterCriteria()) == sample_books


def test_result_is_a_new_list(sample_books):
    result = apply_filters(sample_books, FilterCriteria())
    result.pop()
    assert len(sample_books) == 4


def test_author_substring_case_insensitive(sample_books):
    assert ids(apply_filters(sample_books, FilterCriteria(author="HERBERT"))) == [2, 4]


def test_genre_skips_books_without_genre(sample_books):
    assert ids(apply_filters(sample_books, FilterCriteria(genre="fiction"))) == [2, 4]
    assert ids(apply_filters(sample_books, FilterCriteria(genre="a"))) == [1]


def test_available_partitions(sample_books):
    on = apply_filters(sample_books, FilterCriteria(available=True))
    off = apply_filters(sample_books, FilterCriteria(available=False))
    assert all(b.available for b in on)
    assert not any(b.available for b in off)
    assert sorted(ids(on) + ids(off)) == ids(sample_books)


def test_search_matches_title_or_author(sample_books):
    assert ids(apply_filters(sample_books, FilterCriteria(search="dune"))) == [2, 4]
    assert ids(apply_filters(sample_books, FilterCriteria(search="austen"))) == [3]


def test_criteria_combine_with_and(sample_books):
    criteria = FilterCriteria(author="herbert", available=True, search="children")
    assert ids(apply_filters(sample_books, criteria)) == [4]
    criteria = FilterCriteria(author="tolkien", genre="science")
    assert apply_filters(sample_books, criteria) == []


def test_empty_strings_impose_no_constraint(sample_books):
    criteria = FilterCriteria(author="", genre="", search="")
    assert apply_filters(sample_books, criteria) == sample_books


def test_parse_available():
    assert parse_available(None) is None
    assert parse_available("true") is True
    assert parse_available("TRUE") is True
    assert parse_available("false") is False
    assert parse_available("yes") is False
    assert parse_available("") is False
