# book_api/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import catalog_router
from .catalog.router import CatalogRoute
from .config import Settings, get_settings
from .log import setup_logging
from .storage import BookStore

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found. Visit / for available endpoints."

ENDPOINTS = {
    "GET /books": "Get all books (supports filtering)",
    "GET /books/:id": "Get a specific book by ID",
    "POST /books": "Add a new book",
    "PUT /books/:id": "Update a book by ID",
    "DELETE /books/:id": "Delete a book by ID",
    "GET /books/stats": "Get book statistics",
}

QUERY_PARAMETERS = {
    "author": "Filter by author name",
    "genre": "Filter by genre",
    "available": "Filter by availability (true/false)",
    "search": "Search in title and author",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods on known paths both read as
    # "no such route" to the client.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": ROUTE_NOT_FOUND},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or non-object request bodies are reported as a 400."""
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    logger.info("%s %s -> 400: %s", request.method, request.url.path, "; ".join(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Validation failed", "errors": errors},
    )


async def strip_trailing_slash(request: Request, call_next):
    """Serve ``/books/`` and ``/books/1/`` like ``/books`` and ``/books/1``."""
    path = request.scope["path"]
    if path != "/" and path.endswith("/"):
        request.scope["path"] = path.rstrip("/") or "/"
    return await call_next(request)


meta_router = APIRouter(tags=["meta"], route_class=CatalogRoute)


@meta_router.get("/")
def read_root(request: Request):
    """Describe the available endpoints and listing filters."""
    return {
        "success": True,
        "message": f"Welcome to the {request.app.title}!",
        "version": request.app.version,
        "endpoints": ENDPOINTS,
        "queryParameters": QUERY_PARAMETERS,
    }


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Build the application around its own ``BookStore``.

    Each call gets a fresh store (seeded with the sample books unless
    ``seed_sample_books`` is off), so tests can create isolated apps.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory REST API for managing a collection of books.",
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    if store is None:
        store = BookStore.with_sample_books() if settings.seed_sample_books else BookStore()
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.middleware("http")(strip_trailing_slash)

    app.include_router(meta_router)
    app.include_router(catalog_router)
    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn on the configured host and port."""
    settings = get_settings()
    logger.info("Book Management API is running on http://%s:%s", settings.host, settings.port)
    logger.info("Visit http://%s:%s to see available endpoints", settings.host, settings.port)
    uvicorn.run(
        "book_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
