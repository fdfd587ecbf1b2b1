"""
Search module for per-file substring search.

Provides the search engine and its result statistics model.
"""

from .models import SearchStats
from .substring_engine import SubstringSearchEngine

__all__ = [
    "SearchStats",
    "SubstringSearchEngine"
]
