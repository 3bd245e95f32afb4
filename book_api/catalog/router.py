"""
Route definitions for the book catalogue.

Endpoints under /books:
- GET    /books            : list books, optionally filtered
- GET    /books/stats      : availability counts and genre histogram
- GET    /books/{book_id}  : get one book
- POST   /books            : add a book
- PUT    /books/{book_id}  : update the fields sent in the body
- DELETE /books/{book_id}  : remove a book

Handlers raise ``CatalogError`` subclasses; ``CatalogRoute`` turns them
into envelopes, and turns anything unexpected into a 500 envelope
instead of letting it escape.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import BookValidationError, CatalogError
from ..models import BookCreate, BookUpdate
from ..storage import BookStore
from .filters import apply_filters, parse_available
from .schemas import (
    BookEnvelope,
    BookListEnvelope,
    ErrorEnvelope,
    FilterCriteria,
    StatsEnvelope,
)
from .stats import compute_stats
from .validators import clean_candidate, validate_book

logger = logging.getLogger(__name__)


class CatalogRoute(APIRoute):
    """Route class that renders errors as ``{success: false, ...}`` envelopes."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_handler = super().get_route_handler()

        async def catalog_route_handler(request: Request) -> Response:
            try:
                return await original_handler(request)
            except (StarletteHTTPException, RequestValidationError):
                # Left to the application-level handlers in main.py
                raise
            except CatalogError as exc:
                logger.info(
                    "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message
                )
                return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())
            except Exception as exc:
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={
                        "success": False,
                        "message": "Internal server error",
                        "error": str(exc),
                    },
                )

        return catalog_route_handler


router = APIRouter(prefix="/books", tags=["books"], route_class=CatalogRoute)

_NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Book not found"}}
_BAD_REQUEST = {400: {"model": ErrorEnvelope, "description": "Validation failed"}}
_CONFLICT = {409: {"model": ErrorEnvelope, "description": "Duplicate ISBN"}}


def get_store(request: Request) -> BookStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.store


def _validated(payload: Dict[str, Any]) -> Dict[str, Any]:
    errors = validate_book(payload)
    if errors:
        raise BookValidationError(errors)
    return payload


@router.get("", response_model=BookListEnvelope, response_model_exclude_none=True)
def list_books(
    author: Optional[str] = Query(default=None, description="Filter by author name"),
    genre: Optional[str] = Query(default=None, description="Filter by genre"),
    available: Optional[str] = Query(default=None, description="Filter by availability (true/false)"),
    search: Optional[str] = Query(default=None, description="Search in title and author"),
    store: BookStore = Depends(get_store),
) -> BookListEnvelope:
    criteria = FilterCriteria(
        author=author,
        genre=genre,
        available=parse_available(available),
        search=search,
    )
    books = apply_filters(store.list(), criteria)
    return BookListEnvelope(count=len(books), data=books)


# Registered before /{book_id} so "stats" is never read as an id.
@router.get("/stats", response_model=StatsEnvelope, response_model_exclude_none=True)
def get_stats(store: BookStore = Depends(get_store)) -> StatsEnvelope:
    return StatsEnvelope(data=compute_stats(store.list()))


@router.get(
    "/{book_id}",
    response_model=BookEnvelope,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
def get_book(book_id: str, store: BookStore = Depends(get_store)) -> BookEnvelope:
    return BookEnvelope(data=store.get(book_id))


@router.post(
    "",
    response_model=BookEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT},
)
def create_book(
    payload: Dict[str, Any] = Body(..., description="title, author, year?, genre?, isbn?, available?"),
    store: BookStore = Depends(get_store),
) -> BookEnvelope:
    candidate = BookCreate(**clean_candidate(_validated(payload)))
    book = store.insert(candidate)
    return BookEnvelope(message="Book created successfully", data=book)


@router.put(
    "/{book_id}",
    response_model=BookEnvelope,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
def update_book(
    book_id: str,
    payload: Dict[str, Any] = Body(..., description="Any subset of the book fields"),
    store: BookStore = Depends(get_store),
) -> BookEnvelope:
    """Apply the fields present in the body; the rest keep their values.

    The rules are checked against the book as it would look after the
    update, so a partial body only has to be valid for what it changes.
    """
    with store.lock:
        current = store.get(book_id)
        _validated({**current.model_dump(), **payload})
        patch = BookUpdate(**clean_candidate(payload))
        book = store.update(current.id, patch)
    return BookEnvelope(message="Book updated successfully", data=book)


@router.delete(
    "/{book_id}",
    response_model=BookEnvelope,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
def delete_book(book_id: str, store: BookStore = Depends(get_store)) -> BookEnvelope:
    book = store.delete(book_id)
    return BookEnvelope(message="Book deleted successfully", data=book)
