"""
Database schema definitions for the page search engine.

Defines the texts table holding one row per indexed page, with the
original page text next to its canonical search form.
"""

from ..core import get_logger
from .connection import DatabaseManager

logger = get_logger(__name__)


TEXTS_TABLE = """
CREATE TABLE IF NOT EXISTS texts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    filepath TEXT NOT NULL,
    page INTEGER NOT NULL,
    searchable_content TEXT NOT NULL,
    original_content TEXT NOT NULL
)
"""

TEXTS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_texts_filepath ON texts(filepath)",
    "CREATE INDEX IF NOT EXISTS idx_texts_filepath_page ON texts(filepath, page)"
]


def init_schema(manager: DatabaseManager) -> None:
    """
    Initialize database schema if not exists.

    Args:
        manager: Database to initialize.
    """
    logger.debug(f"Initializing database schema in {manager.db_path}")

    with manager.cursor() as cur:
        cur.execute(TEXTS_TABLE)

        for index_sql in TEXTS_INDEXES:
            cur.execute(index_sql)


def reset_schema(manager: DatabaseManager) -> None:
    """
    Drop and recreate all tables.

    Warning: This deletes all indexed data.
    """
    logger.warning("Resetting database schema - all data will be deleted")

    with manager.cursor() as cur:
        cur.execute("DROP TABLE IF EXISTS texts")

    init_schema(manager)

    logger.info("Schema reset complete")


def get_statistics(manager: DatabaseManager) -> dict:
    """
    Get database statistics for dashboard display.

    Returns:
        Dictionary with page and file counts and content size.
    """
    with manager.connection() as conn:
        stats = {}

        row = conn.execute("SELECT COUNT(*) as count FROM texts").fetchone()
        stats["total_pages"] = row["count"]

        row = conn.execute(
            "SELECT COUNT(DISTINCT filepath) as count FROM texts"
        ).fetchone()
        stats["total_files"] = row["count"]

        row = conn.execute(
            "SELECT SUM(LENGTH(original_content)) as total FROM texts"
        ).fetchone()
        total_bytes = row["total"] or 0
        stats["total_content_mb"] = round(total_bytes / (1024 * 1024), 2)

    return stats
