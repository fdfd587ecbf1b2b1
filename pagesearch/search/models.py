"""
Data models for search functionality.
"""

from dataclasses import dataclass


@dataclass
class SearchStats:
    """
    Statistics about a search execution.

    Attributes:
        query: The original query text.
        canonical_query: The query after canonicalization.
        filepath: File key the search was scoped to.
        total_results: Number of matching pages.
        execution_time_ms: Query execution time in milliseconds.
    """
    query: str
    canonical_query: str
    filepath: str
    total_results: int
    execution_time_ms: float = 0.0
