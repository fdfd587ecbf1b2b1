"""
Indexing pipeline for the page search engine.

Turns page-marked text into stored page records. Re-indexing a file is
a full replace: its existing records are deleted before the new stream
is read, so at most one generation of pages exists per file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..core import (
    Config,
    get_config,
    get_logger,
    PageSearchError,
    ProgressObserver,
    ValidationError
)
from ..database import PageRecord, PageRepository
from ..utils import has_supported_extension
from .file_scanner import FileScanner
from .page_parser import parse_pages

logger = get_logger(__name__)


@dataclass
class IndexingStats:
    """Statistics from an indexing run."""
    files_scanned: int = 0
    files_indexed: int = 0
    files_failed: int = 0
    pages_indexed: int = 0
    errors: List[str] = field(default_factory=list)


class IndexBuilder:
    """
    Parses page-marked text and writes page records to the repository.

    Progress is reported two ways: per-page checkpoints to the observer,
    and per-file progress_callback(current, total, filename) during
    directory builds.
    """

    def __init__(
        self,
        repository: PageRepository,
        config: Config = None,
        observer: Optional[ProgressObserver] = None,
        progress_callback: Callable[[int, int, str], None] = None
    ):
        """
        Initialize the index builder.

        Args:
            repository: Store the page records go to.
            config: Settings; defaults to the global config.
            observer: Receives file/page checkpoints.
            progress_callback: Optional callback(current, total, filename)
                              called for each file during build().
        """
        self.config = config or get_config()
        self.repository = repository
        self.observer = observer or ProgressObserver()
        self.progress_callback = progress_callback

        self.extensions = self.config.indexing.supported_extensions
        self.encoding = self.config.indexing.encoding
        self.flush_unterminated = self.config.indexing.flush_unterminated_pages
        self.log_every = self.config.indexing.log_progress_every

    def index_stream(self, lines: Iterable[str], file_key: str) -> int:
        """
        Replace the stored pages of file_key with the pages in lines.

        Existing records are deleted before the first line is read. The
        store stays locked until the stream is exhausted, so concurrent
        re-indexes of one file never leave two generations behind.
        Pages are stored as they close, so on a parse error the pages
        before it stay committed.

        Args:
            lines: Page-marked text lines.
            file_key: Identifier the pages are stored under.

        Returns:
            Number of pages stored.

        Raises:
            PageParseError: On a malformed page marker.
            DatabaseError: If the store rejects a write.
        """
        file_key = str(file_key)
        pages_added = 0

        with self.repository.manager.lock():
            self.repository.delete_all_for_file(file_key)
            self.observer.file_started(file_key)

            for parsed in parse_pages(
                lines,
                filepath=file_key,
                observer=self.observer,
                flush_unterminated=self.flush_unterminated
            ):
                record = PageRecord.create(file_key, parsed.page, parsed.original_content)
                self.repository.put(record)
                self.observer.page_indexed(file_key, parsed.page)
                pages_added += 1

        logger.debug(f"Indexed {pages_added} pages for {file_key}")
        return pages_added

    def index_file(self, filepath: Union[str, Path], file_key: str = None) -> int:
        """
        Index a single text file, replacing existing entries.

        Args:
            filepath: Path to the page-marked text file.
            file_key: Key to store pages under. Defaults to the path as given.

        Bytes that do not decode in the configured encoding are replaced
        with U+FFFD, which canonicalize() drops.

        Returns:
            Number of pages indexed.

        Raises:
            ValidationError: If the file has an unsupported extension or
                             does not exist. Nothing is deleted in that case.
        """
        file_key = file_key or str(filepath)
        filepath = Path(filepath)

        self.validate(filepath)

        with open(filepath, "r", encoding=self.encoding, errors="replace") as f:
            return self.index_stream(f, file_key)

    def validate(self, filepath: Path) -> None:
        """
        Check that filepath can be indexed.

        Raises:
            ValidationError: On unsupported extension or missing file.
        """
        if not has_supported_extension(filepath, self.extensions):
            raise ValidationError(
                f"File is not one of {', '.join(self.extensions)}",
                filepath=str(filepath)
            )

        if not filepath.is_file():
            raise ValidationError(
                "File does not exist",
                filepath=str(filepath)
            )

    def build(self, root_directory: Union[str, Path] = None) -> IndexingStats:
        """
        Index every supported file under a directory.

        A file that fails validation, parsing, or decoding is recorded in
        the stats and the run moves on to the next file.

        Args:
            root_directory: Directory to scan. Defaults to config data directory.

        Returns:
            IndexingStats with counts and any errors encountered.
        """
        stats = IndexingStats()

        scanner = FileScanner(
            root_directory or self.config.paths.data_directory,
            extensions=self.extensions,
            max_file_size_mb=self.config.indexing.max_file_size_mb
        )

        files = scanner.list_all()
        stats.files_scanned = len(files)

        logger.info(f"Found {stats.files_scanned} files to process")

        for i, filepath in enumerate(files):
            if self.progress_callback:
                self.progress_callback(i + 1, stats.files_scanned, filepath.name)

            try:
                stats.pages_indexed += self.index_file(filepath)
                stats.files_indexed += 1

            except PageSearchError as e:
                stats.files_failed += 1
                error_msg = f"{filepath.name}: {e.message}"
                stats.errors.append(error_msg)
                logger.warning(f"Failed to index: {error_msg}")

            except OSError as e:
                stats.files_failed += 1
                error_msg = f"{filepath.name}: {e}"
                stats.errors.append(error_msg)
                logger.warning(f"Failed to read: {error_msg}")

            if (i + 1) % self.log_every == 0:
                logger.info(
                    f"Progress: {i + 1}/{stats.files_scanned} files "
                    f"({stats.files_indexed} indexed, {stats.files_failed} failed)"
                )

        logger.info(
            f"Indexing complete: {stats.files_indexed} files indexed, "
            f"{stats.pages_indexed} pages, {stats.files_failed} failures"
        )

        return stats
