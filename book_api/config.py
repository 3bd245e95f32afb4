"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings for the book API.

    Every field can be overridden with a ``BOOK_API_`` prefixed
    environment variable (``BOOK_API_PORT=8080``) or from a ``.env``
    file in the working directory.
    """

    app_name: str = "Book Management API"
    version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Load the three sample books on startup
    seed_sample_books: bool = True

    cors_origins: List[str] = ["*"]

    model_config = {
        "env_prefix": "BOOK_API_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
