"""
Page repository for CRUD operations on the texts table.

Provides the store operations the indexer and search engine rely on:
create, delete-by-file, existence check, distinct file listing, and
substring lookup scoped to one file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..core import get_logger
from ..utils import canonicalize
from .connection import DatabaseManager

logger = get_logger(__name__)

LIKE_ESCAPE = "\\"


@dataclass
class PageRecord:
    """Represents a single indexed page."""
    id: Optional[int]
    filepath: str
    page: int
    original_content: str
    searchable_content: str

    @classmethod
    def create(cls, filepath: Union[str, Path], page: int, original_content: str) -> "PageRecord":
        """
        Build an unsaved record, deriving the searchable form from the original.

        Args:
            filepath: File key the page belongs to.
            page: Page number from the source markers.
            original_content: Page text as extracted.

        Returns:
            PageRecord with id None.
        """
        return cls(
            id=None,
            filepath=str(filepath),
            page=page,
            original_content=original_content,
            searchable_content=canonicalize(original_content)
        )


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class PageRepository:
    """
    Repository for page record storage.

    Every method goes through the injected DatabaseManager, which
    serializes access to its connection.
    """

    def __init__(self, manager: DatabaseManager):
        """
        Initialize the repository.

        Args:
            manager: Database the records live in.
        """
        self.manager = manager

    def put(self, record: PageRecord) -> int:
        """
        Insert a page record.

        Args:
            record: Record to store. Its id is ignored.

        Returns:
            Inserted row ID.
        """
        with self.manager.cursor() as cur:
            cur.execute("""
                INSERT INTO texts
                (filepath, page, searchable_content, original_content)
                VALUES (?, ?, ?, ?)
            """, (
                record.filepath,
                record.page,
                record.searchable_content,
                record.original_content
            ))

            return cur.lastrowid

    def delete_all_for_file(self, filepath: Union[str, Path]) -> int:
        """
        Delete all pages for a file.

        Args:
            filepath: File key.

        Returns:
            Number of rows deleted, 0 when the file was never indexed.
        """
        with self.manager.cursor() as cur:
            cur.execute(
                "DELETE FROM texts WHERE filepath = ?",
                (str(filepath),)
            )
            deleted = cur.rowcount

        if deleted > 0:
            logger.debug(f"Deleted {deleted} pages for: {filepath}")

        return deleted

    def exists_for_file(self, filepath: Union[str, Path]) -> bool:
        """
        Check if a file is already indexed.

        Args:
            filepath: File key to check.

        Returns:
            True if any pages exist for this file.
        """
        with self.manager.connection() as conn:
            row = conn.execute(
                "SELECT 1 FROM texts WHERE filepath = ? LIMIT 1",
                (str(filepath),)
            ).fetchone()
            return row is not None

    def list_distinct_files(self) -> List[str]:
        """
        Get every indexed file key, sorted, without duplicates.

        Returns:
            List of filepath strings.
        """
        with self.manager.connection() as conn:
            rows = conn.execute(
                "SELECT DISTINCT filepath FROM texts ORDER BY filepath"
            ).fetchall()
            return [row["filepath"] for row in rows]

    def find_by_substring(self, filepath: Union[str, Path], substring: str) -> List[PageRecord]:
        """
        Find pages of one file whose searchable content contains a substring.

        Args:
            filepath: File key to restrict the lookup to.
            substring: Canonical text to look for.

        Returns:
            Matching records ordered by page number.
        """
        pattern = f"%{_escape_like(substring)}%"

        with self.manager.connection() as conn:
            rows = conn.execute(
                """
                SELECT * FROM texts
                WHERE filepath = ? AND searchable_content LIKE ? ESCAPE ?
                ORDER BY page, id
                """,
                (str(filepath), pattern, LIKE_ESCAPE)
            ).fetchall()

            return [self._row_to_record(row) for row in rows]

    def get_by_file(self, filepath: Union[str, Path]) -> List[PageRecord]:
        """
        Fetch all pages for a file.

        Args:
            filepath: File key.

        Returns:
            List of PageRecord objects ordered by page number.
        """
        with self.manager.connection() as conn:
            rows = conn.execute(
                "SELECT * FROM texts WHERE filepath = ? ORDER BY page, id",
                (str(filepath),)
            ).fetchall()

            return [self._row_to_record(row) for row in rows]

    def count(self) -> int:
        """Get total page count."""
        with self.manager.connection() as conn:
            row = conn.execute("SELECT COUNT(*) as count FROM texts").fetchone()
            return row["count"]

    def count_files(self) -> int:
        """Get number of distinct indexed files."""
        with self.manager.connection() as conn:
            row = conn.execute(
                "SELECT COUNT(DISTINCT filepath) as count FROM texts"
            ).fetchone()
            return row["count"]

    @staticmethod
    def _row_to_record(row) -> PageRecord:
        """Convert a database row to a PageRecord object."""
        return PageRecord(
            id=row["id"],
            filepath=row["filepath"],
            page=row["page"],
            original_content=row["original_content"],
            searchable_content=row["searchable_content"]
        )
