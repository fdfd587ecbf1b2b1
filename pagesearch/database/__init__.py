"""
Database module for SQLite persistence of indexed pages.

Provides connection management, schema definitions, and the page
repository used by the indexer and the search engine.
"""

from .connection import DatabaseManager, MEMORY_DATABASE
from .schema import init_schema, reset_schema, get_statistics
from .repository import PageRecord, PageRepository

__all__ = [
    "DatabaseManager",
    "MEMORY_DATABASE",
    "init_schema",
    "reset_schema",
    "get_statistics",
    "PageRecord",
    "PageRepository"
]
