"""
Substring search over canonicalized page content.

The query goes through the same canonicalize() as indexed pages, so
case, accents, punctuation and spacing never affect whether a page
matches. Results are the stored pages of one file, in page order,
carrying their original text.
"""

import time
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..core import Config, get_config, get_logger, ProgressObserver
from ..database import PageRecord, PageRepository
from ..utils import canonicalize
from .models import SearchStats

logger = get_logger(__name__)


class SubstringSearchEngine:
    """Searches the pages of a single file for a canonical substring."""

    def __init__(
        self,
        repository: PageRepository,
        config: Config = None,
        observer: Optional[ProgressObserver] = None
    ):
        """
        Initialize the search engine.

        Args:
            repository: Store to query.
            config: Settings; defaults to the global config.
            observer: Receives search checkpoints.
        """
        self.config = config or get_config()
        self.repository = repository
        self.observer = observer or ProgressObserver()

        self.empty_query_matches_all = self.config.search.empty_query_matches_all

    def search(self, query: str, filepath: Union[str, Path]) -> List[PageRecord]:
        """
        Find the pages of filepath containing query.

        An unknown filepath gives an empty list. A query with no letters
        or digits gives an empty list unless search.empty_query_matches_all
        is set, in which case every page of the file matches.

        Args:
            query: Free text to look for.
            filepath: File key to restrict the search to.

        Returns:
            Matching PageRecord objects ordered by page number.

        Raises:
            DatabaseError: If the store query fails; passed through unchanged.
        """
        results, _ = self.search_with_stats(query, filepath)
        return results

    def search_with_stats(
        self,
        query: str,
        filepath: Union[str, Path]
    ) -> Tuple[List[PageRecord], SearchStats]:
        """
        Same as search(), also returning timing and the canonical query.

        Returns:
            Tuple of (list of PageRecord, SearchStats).
        """
        filepath = str(filepath)
        start_time = time.time()

        self.observer.search_started(query, filepath)

        canonical_query = canonicalize(query)

        if not canonical_query and not self.empty_query_matches_all:
            logger.debug(f"Query {query!r} has no searchable characters")
            results = []
        else:
            results = self.repository.find_by_substring(filepath, canonical_query)

        execution_time = (time.time() - start_time) * 1000

        stats = SearchStats(
            query=query,
            canonical_query=canonical_query,
            filepath=filepath,
            total_results=len(results),
            execution_time_ms=round(execution_time, 2)
        )

        self.observer.search_completed(query, filepath, stats.total_results)
        for record in results:
            self.observer.result_found(record)

        return results, stats

    def list_files(self) -> List[str]:
        """Get every indexed file key."""
        return self.repository.list_distinct_files()

    def is_indexed(self, filepath: Union[str, Path]) -> bool:
        """Check whether filepath has any indexed pages."""
        return self.repository.exists_for_file(filepath)
