"""
Catalog package for the book management API.

This package holds everything behind the ``/books`` endpoints: the
field rules applied to incoming books, the listing filters, the
statistics aggregate, the response envelopes and the route handlers
that tie them to the ``BookStore`` owned by the application.
"""

from .router import router as catalog_router  # noqa: F401
