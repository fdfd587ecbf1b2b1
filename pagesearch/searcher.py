"""
High-level entry point tying the store, indexer and search engine together.

    with PageSearcher(":memory:") as searcher:
        searcher.index_file("book.txt")
        for page in searcher.search("all of", "book.txt"):
            print(page.page, page.original_content)
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .core import Config, ConfigurationError, get_config, ProgressObserver
from .database import DatabaseManager, PageRecord, PageRepository, init_schema
from .indexer import IndexBuilder, IndexingStats
from .search import SubstringSearchEngine


def _load_config() -> Config:
    try:
        return get_config()
    except ConfigurationError:
        return Config.defaults()


class PageSearcher:
    """
    Owns one database and exposes indexing and search over it.

    The database handle is created here and shared by the indexer and
    the search engine; nothing reaches for a module-level connection.
    """

    def __init__(
        self,
        db_path: Union[str, Path] = None,
        config: Config = None,
        observer: Optional[ProgressObserver] = None
    ):
        """
        Open (and if needed create) the index database.

        Args:
            db_path: SQLite file or ":memory:". Defaults to config.paths.database_path.
            config: Settings. Defaults to config/config.json if found, else built-in defaults.
            observer: Receives indexing and search checkpoints.
        """
        self.config = config or _load_config()

        self.manager = DatabaseManager.from_config(self.config, db_path)
        init_schema(self.manager)

        self.repository = PageRepository(self.manager)
        self.builder = IndexBuilder(self.repository, config=self.config, observer=observer)
        self.engine = SubstringSearchEngine(self.repository, config=self.config, observer=observer)

    def index_file(self, filepath: Union[str, Path], file_key: str = None) -> int:
        """Index one text file, replacing its previous pages. Returns pages stored."""
        return self.builder.index_file(filepath, file_key)

    def index_stream(self, lines: Iterable[str], file_key: str) -> int:
        """Index already-open page-marked lines under file_key."""
        return self.builder.index_stream(lines, file_key)

    def index_directory(self, root_directory: Union[str, Path] = None) -> IndexingStats:
        """Index every supported file under root_directory."""
        return self.builder.build(root_directory)

    def search(self, query: str, filepath: Union[str, Path]) -> List[PageRecord]:
        """Search one file's pages."""
        return self.engine.search(query, filepath)

    def get_indexed_files(self) -> List[str]:
        """List every indexed file key."""
        return self.engine.list_files()

    def is_indexed(self, filepath: Union[str, Path]) -> bool:
        """Check whether a file key has indexed pages."""
        return self.engine.is_indexed(filepath)

    def close(self) -> None:
        """Close the database connection."""
        self.manager.close()

    def __enter__(self) -> "PageSearcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
