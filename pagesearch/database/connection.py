"""
SQLite connection management for the page search engine.

A DatabaseManager owns one connection and a re-entrant lock, so every
statement through the same manager is serialized. Multi-statement
sequences such as a re-index hold lock() for their whole duration. The
single connection also lets ":memory:" databases live for the lifetime
of the manager.
"""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from ..core import Config, get_config, get_logger, DatabaseError
from ..utils import ensure_directory

logger = get_logger(__name__)

MEMORY_DATABASE = ":memory:"


class DatabaseManager:
    """
    Manages a single SQLite connection with proper lifecycle handling.

    Enables WAL mode for concurrent readers in other processes and
    provides context managers for safe commit/rollback.
    """

    def __init__(
        self,
        db_path: Union[str, Path] = MEMORY_DATABASE,
        timeout: float = 10.0,
        journal_mode: str = "WAL",
        synchronous: str = "NORMAL"
    ):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
            timeout: Seconds to wait on a locked database.
            journal_mode: SQLite journal_mode pragma value.
            synchronous: SQLite synchronous pragma value.
        """
        self.db_path = str(db_path)
        self.timeout = timeout
        self.journal_mode = journal_mode
        self.synchronous = synchronous

        if self.db_path != MEMORY_DATABASE:
            ensure_directory(Path(self.db_path).parent)

        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls,
        config: Config = None,
        db_path: Union[str, Path] = None
    ) -> "DatabaseManager":
        """
        Build a manager from configuration.

        Args:
            config: Settings; defaults to the global config.
            db_path: Override for config.paths.database_path.
        """
        config = config or get_config()
        return cls(
            db_path=db_path or config.paths.database_path,
            timeout=config.database.timeout_seconds,
            journal_mode=config.database.journal_mode,
            synchronous=config.database.synchronous
        )

    def _create_connection(self) -> sqlite3.Connection:
        """Create a new database connection with optimal settings."""
        try:
            conn = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=self.timeout
            )

            conn.row_factory = sqlite3.Row

            conn.execute(f"PRAGMA journal_mode={self.journal_mode}")
            conn.execute(f"PRAGMA synchronous={self.synchronous}")
            conn.execute("PRAGMA temp_store=MEMORY")

            return conn

        except sqlite3.Error as e:
            raise DatabaseError(
                f"Failed to connect to database: {e}",
                {"database": self.db_path, "operation": "connect"}
            ) from e

    def _get_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            self._connection = self._create_connection()
            logger.debug(f"Opened database: {self.db_path}")
        return self._connection

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for read access to the shared connection.

        Yields:
            SQLite connection with Row factory enabled.

        Raises:
            DatabaseError: If a query fails inside the block.
        """
        with self._lock:
            conn = self._get_connection()
            try:
                yield conn
            except sqlite3.Error as e:
                raise DatabaseError(f"Database query failed: {e}") from e

    @contextmanager
    def lock(self) -> Generator[None, None, None]:
        """
        Hold the manager's lock across several statements.

        Other threads using this manager block until the block exits.
        Statements inside it still commit one by one.
        """
        with self._lock:
            yield

    @contextmanager
    def cursor(self, commit: bool = True) -> Generator[sqlite3.Cursor, None, None]:
        """
        Context manager for database cursors with automatic commit/rollback.

        Args:
            commit: Whether to commit on successful exit.

        Yields:
            SQLite cursor for query execution.

        Raises:
            DatabaseError: If a statement fails; the transaction is rolled back.
        """
        with self._lock:
            conn = self._get_connection()
            cur = conn.cursor()

            try:
                yield cur
                if commit:
                    conn.commit()
            except sqlite3.Error as e:
                conn.rollback()
                raise DatabaseError(f"Database write failed: {e}") from e
            except Exception:
                conn.rollback()
                raise
            finally:
                cur.close()

    def close(self) -> None:
        """Close the shared connection. The manager reopens lazily if reused."""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
                logger.debug(f"Closed database: {self.db_path}")

    def __enter__(self) -> "DatabaseManager":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
