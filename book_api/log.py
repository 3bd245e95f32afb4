"""Logging setup for the book API."""

import logging
import sys

LOGGER_NAME = "book_api"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Calling this more than once replaces the previous handler instead
    of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger
