"""
Logging utilities.

Provides category-based logging filtering.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import DEFAULT_LOG_DATEFMT, DEFAULT_LOG_FORMAT


class CategoryFilter(logging.Filter):
    """Filter log records by logger name prefix."""

    def __init__(self, categories: list[str]):
        super().__init__()
        self.categories = categories

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.categories:
            return True
        return any(record.name.startswith(cat) for cat in self.categories)


def setup_logging(log_level: str = "INFO", log_categories: Optional[list[str]] = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_categories: Logger name prefixes to keep (empty = all)
    """
    if log_categories is None:
        log_categories = []

    level = getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATEFMT))

    if log_categories:
        handler.addFilter(CategoryFilter(log_categories))

    root_logger.addHandler(handler)
