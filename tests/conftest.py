"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from book_api.config import Settings
from book_api.main import create_app
from book_api.models import Book
from book_api.storage import BookStore


@pytest.fixture
def settings():
    """Settings for tests, independent of the environment."""
    return Settings(seed_sample_books=True, log_level="WARNING")


@pytest.fixture
def app(settings):
    """A fresh application with its own seeded store."""
    return create_app(settings=settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def seeded_store():
    return BookStore.with_sample_books()


@pytest.fixture
def sample_books():
    """A small list of books for the pure helpers."""
    return [
        Book(id=1, title="The Hobbit", author="J.R.R. Tolkien", year=1937, genre="Fantasy", available=True),
        Book(id=2, title="Dune", author="Frank Herbert", year=1965, genre="Science Fiction", available=False),
        Book(id=3, title="Emma", author="Jane Austen", year=1815, available=True),
        Book(id=4, title="Children of Dune", author="Frank Herbert", genre="science fiction", available=True),
    ]
