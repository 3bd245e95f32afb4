"""In-memory REST API for managing a collection of books."""

__version__ = "1.0.0"
