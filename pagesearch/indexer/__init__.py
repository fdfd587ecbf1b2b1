"""
Indexer module for turning page-marked text into stored page records.

Coordinates file discovery, page parsing, and repository writes.
"""

from .file_scanner import FileScanner
from .index_builder import IndexBuilder, IndexingStats
from .page_parser import ParsedPage, parse_pages, parse_page_number

__all__ = [
    "FileScanner",
    "IndexBuilder",
    "IndexingStats",
    "ParsedPage",
    "parse_pages",
    "parse_page_number"
]
