"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample page-marked text files, temporary
configurations and in-memory databases so tests never touch real data.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


SAMPLE_PAGES = """START OF PAGE 1
  All of the things that you say--,
END OF PAGE 1
START OF PAGE 2

Deeper than roses (all my heart knows this),
END OF PAGE 2
START OF PAGE 3
All that is left of our days--
END OF PAGE 3
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="page_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def config_data(temp_dir: Path) -> dict:
    """Raw config dict pointing every path into temp_dir."""
    data_dir = temp_dir / "data"
    data_dir.mkdir()

    output_dir = temp_dir / "output"
    output_dir.mkdir()

    logs_dir = output_dir / "logs"
    logs_dir.mkdir()

    return {
        "paths": {
            "data_directory": str(data_dir),
            "database_path": str(output_dir / "test.sqlite"),
            "logs_directory": str(logs_dir)
        },
        "indexing": {
            "supported_extensions": [".txt"],
            "encoding": "utf-8",
            "max_file_size_mb": 100,
            "flush_unterminated_pages": True,
            "log_progress_every": 5
        },
        "database": {
            "timeout_seconds": 5,
            "journal_mode": "WAL",
            "synchronous": "NORMAL"
        },
        "search": {
            "empty_query_matches_all": False,
            "snippet_length": 120
        },
        "gui": {
            "page_title": "Test Page Search",
            "results_per_page": 10
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }


@pytest.fixture
def temp_config(temp_dir: Path, config_data: dict) -> Path:
    """
    Create a temporary config.json for testing.

    Returns:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    return config_path


@pytest.fixture
def app_config(temp_config: Path):
    """Config object loaded from temp_config, not installed as the singleton."""
    from pagesearch.core.config_loader import Config
    return Config.from_file(temp_config)


@pytest.fixture
def manager():
    """In-memory database with the schema initialized."""
    from pagesearch.database import DatabaseManager, init_schema

    db = DatabaseManager(":memory:")
    init_schema(db)
    yield db
    db.close()


@pytest.fixture
def repository(manager):
    """Page repository on the in-memory database."""
    from pagesearch.database import PageRepository
    return PageRepository(manager)


@pytest.fixture
def sample_txt(temp_dir: Path) -> Path:
    """A three-page page-marked text file."""
    path = temp_dir / "poem.txt"
    path.write_text(SAMPLE_PAGES, encoding="utf-8")
    return path


@pytest.fixture
def sample_collection(temp_dir: Path) -> Path:
    """
    Create several text files in a nested directory structure.

    Returns:
        Path to the collection root.
    """
    root = temp_dir / "collection"
    (root / "folder1").mkdir(parents=True)
    (root / "folder2").mkdir()

    (root / "root_doc.txt").write_text(SAMPLE_PAGES, encoding="utf-8")
    (root / "folder1" / "doc1.txt").write_text(SAMPLE_PAGES, encoding="utf-8")
    (root / "folder2" / "doc2.txt").write_text(
        "START OF PAGE 7\nseven\nEND OF PAGE 7\n", encoding="utf-8"
    )

    # Not indexable: wrong extension
    (root / "readme.md").write_text("Not page text")

    return root


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from pagesearch.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from pagesearch.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
