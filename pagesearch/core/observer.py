"""
Progress observers for indexing and search.

Observers receive informational checkpoints only. They never influence
what gets stored or returned.
"""

import logging
from typing import Optional


class ProgressObserver:
    """No-op observer. Subclass and override the checkpoints you need."""

    def file_started(self, filepath: str) -> None:
        pass

    def page_found(self, filepath: str, page: int) -> None:
        pass

    def page_indexed(self, filepath: str, page: int) -> None:
        pass

    def search_started(self, query: str, filepath: str) -> None:
        pass

    def search_completed(self, query: str, filepath: str, total_results: int) -> None:
        pass

    def result_found(self, record) -> None:
        pass


class LoggingObserver(ProgressObserver):
    """
    Observer that forwards every checkpoint to a logger.

    Page-level events go to DEBUG so that indexing large collections
    does not flood the console at the default INFO level.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        if logger is None:
            from .logger import get_logger
            logger = get_logger("pagesearch.progress")
        self.logger = logger

    def file_started(self, filepath: str) -> None:
        self.logger.info(f"Indexing {filepath}")

    def page_found(self, filepath: str, page: int) -> None:
        self.logger.debug(f"Page {page} found in {filepath}")

    def page_indexed(self, filepath: str, page: int) -> None:
        self.logger.debug(f"Page {page} indexed for {filepath}")

    def search_started(self, query: str, filepath: str) -> None:
        self.logger.info(f"Searching for: {query} in {filepath}")

    def search_completed(self, query: str, filepath: str, total_results: int) -> None:
        self.logger.info(f"Found {total_results} results")

    def result_found(self, record) -> None:
        self.logger.debug(f"{record.filepath} pp {record.page}: {record.original_content}")
