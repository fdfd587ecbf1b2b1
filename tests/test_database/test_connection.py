"""
Tests for database connection management.

Tests the shared connection, context managers, and SQLite configuration.
"""

import sqlite3
import pytest
from pathlib import Path

from pagesearch.core.exceptions import DatabaseError
from pagesearch.database.connection import DatabaseManager


class TestDatabaseManager:
    """Tests for DatabaseManager class."""

    def test_manager_creates_parent_directory(self, temp_dir: Path):
        """Test that manager creates parent directories."""
        db_path = temp_dir / "subdir" / "nested" / "test.sqlite"

        DatabaseManager(db_path)

        assert db_path.parent.exists()

    def test_connection_context_manager(self):
        """Test connection context manager."""
        with DatabaseManager(":memory:") as manager:
            with manager.connection() as conn:
                assert isinstance(conn, sqlite3.Connection)
                assert conn.execute("SELECT 1").fetchone()[0] == 1

    def test_memory_database_persists_across_calls(self):
        """Test that one manager keeps one in-memory database."""
        with DatabaseManager(":memory:") as manager:
            with manager.cursor() as cur:
                cur.execute("CREATE TABLE test (id INTEGER PRIMARY KEY)")
                cur.execute("INSERT INTO test (id) VALUES (1)")

            with manager.connection() as conn:
                assert conn.execute("SELECT id FROM test").fetchone()["id"] == 1

    def test_cursor_commits_to_file(self, temp_dir: Path):
        """Test that cursor() commits so other connections see the data."""
        db_path = temp_dir / "test.sqlite"

        with DatabaseManager(db_path) as manager:
            with manager.cursor() as cur:
                cur.execute("CREATE TABLE test (id INTEGER PRIMARY KEY)")
                cur.execute("INSERT INTO test (id) VALUES (1)")

        with DatabaseManager(db_path) as other:
            with other.connection() as conn:
                assert conn.execute("SELECT COUNT(*) FROM test").fetchone()[0] == 1

    def test_cursor_rollback_on_error(self):
        """Test that a failed statement rolls back the whole block."""
        with DatabaseManager(":memory:") as manager:
            with manager.cursor() as cur:
                cur.execute("CREATE TABLE test (id INTEGER PRIMARY KEY)")

            with pytest.raises(DatabaseError):
                with manager.cursor() as cur:
                    cur.execute("INSERT INTO test (id) VALUES (1)")
                    cur.execute("INSERT INTO test (id) VALUES (1)")

            with manager.connection() as conn:
                assert conn.execute("SELECT COUNT(*) FROM test").fetchone()[0] == 0

    def test_query_error_wrapped(self):
        """Test that read errors surface as DatabaseError."""
        with DatabaseManager(":memory:") as manager:
            with pytest.raises(DatabaseError) as exc_info:
                with manager.connection() as conn:
                    conn.execute("SELECT * FROM missing_table")

            assert isinstance(exc_info.value.__cause__, sqlite3.Error)

    def test_wal_mode_enabled(self, temp_dir: Path):
        """Test that WAL journal mode is applied to file databases."""
        with DatabaseManager(temp_dir / "wal.sqlite") as manager:
            with manager.connection() as conn:
                result = conn.execute("PRAGMA journal_mode").fetchone()
                assert result[0].lower() == "wal"

    def test_close_then_reopen(self, temp_dir: Path):
        """Test that a closed manager reconnects lazily."""
        manager = DatabaseManager(temp_dir / "reopen.sqlite")

        with manager.cursor() as cur:
            cur.execute("CREATE TABLE test (id INTEGER)")
        manager.close()

        with manager.connection() as conn:
            assert conn.execute("SELECT COUNT(*) FROM test").fetchone()[0] == 0
        manager.close()

    def test_from_config(self, temp_config: Path, reset_config_singleton):
        """Test building a manager from the loaded config."""
        from pagesearch.core.config_loader import get_config

        config = get_config(temp_config)
        manager = DatabaseManager.from_config()

        assert manager.db_path == str(config.paths.database_path)
        assert manager.timeout == 5

    def test_from_config_with_explicit_config(self, app_config):
        """Test that a passed config is used instead of the global one."""
        manager = DatabaseManager.from_config(app_config, ":memory:")

        assert manager.db_path == ":memory:"
        assert manager.timeout == 5

    def test_lock_is_reentrant(self):
        """Test that statements can run while lock() is held."""
        manager = DatabaseManager(":memory:")

        with manager.lock():
            with manager.cursor() as cur:
                cur.execute("CREATE TABLE t (x INTEGER)")
                cur.execute("INSERT INTO t VALUES (1)")
            with manager.connection() as conn:
                assert conn.execute("SELECT COUNT(*) FROM t").fetchone()[0] == 1

        manager.close()
