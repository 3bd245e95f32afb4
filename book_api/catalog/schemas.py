"""
Pydantic schema definitions for the catalog module.

Every response is wrapped in an envelope carrying a ``success`` flag.
Listing responses add a ``count``, write responses add a ``message``
and error responses add ``message`` plus, for validation failures, the
full list of ``errors``. Optional envelope keys that are ``None`` are
left out of the rendered JSON.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import Book


class FilterCriteria(BaseModel):
    """Optional filters for the ``/books`` listing.

    ``available`` is already parsed into a boolean here; ``None`` means
    the client did not ask to filter on availability.
    """

    author: Optional[str] = None
    genre: Optional[str] = None
    available: Optional[bool] = None
    search: Optional[str] = None


class BookStats(BaseModel):
    """Aggregate counts over the whole collection.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_books: int = Field(alias="totalBooks")
    available_books: int = Field(alias="availableBooks")
    unavailable_books: int = Field(alias="unavailableBooks")
    genre_distribution: Dict[str, int] = Field(default_factory=dict, alias="genreDistribution")


class BookEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Book


class BookListEnvelope(BaseModel):
    success: bool = True
    count: int
    data: List[Book]


class StatsEnvelope(BaseModel):
    success: bool = True
    data: BookStats


class ErrorEnvelope(BaseModel):
    """Shape of every non-2xx response."""

    success: bool = False
    message: str
    errors: Optional[List[str]] = None
    error: Optional[str] = None
