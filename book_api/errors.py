"""
Errors raised by the catalogue layer.

Every error knows the HTTP status it maps to and how to render itself
as a response envelope, so request handlers only need to ``raise`` and
the route boundary in ``catalog.router`` takes care of the rest.
"""

from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base error for the book catalogue."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_envelope(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class BookValidationError(CatalogError):
    """Raised when a candidate book fails one or more field rules."""

    status_code = 400

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = list(errors)

    def to_envelope(self) -> Dict[str, Any]:
        envelope = super().to_envelope()
        envelope["errors"] = self.errors
        return envelope


class NotFoundError(CatalogError):
    """Raised when a book id does not resolve."""

    status_code = 404

    def __init__(self, book_id: Any, message: Optional[str] = None):
        super().__init__(message or f"Book with ID {book_id} not found")
        self.book_id = book_id


class ConflictError(CatalogError):
    """Raised when an ISBN is already held by another book."""

    status_code = 409

    def __init__(self, isbn: str, message: str = "A book with this ISBN already exists"):
        super().__init__(message)
        self.isbn = isbn
