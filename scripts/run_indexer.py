"""
CLI script to index page-marked text files.

Usage:
    python scripts/run_indexer.py                    # Index the data directory
    python scripts/run_indexer.py book.txt notes.txt # Index specific files
    python scripts/run_indexer.py --reset            # Drop the index first
    python scripts/run_indexer.py --config path/to/config.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pagesearch.core import get_config, get_logger, ConfigurationError, LoggingObserver, PageSearchError  # noqa: E402
from pagesearch.core.config_loader import reload_config  # noqa: E402
from pagesearch.database import reset_schema  # noqa: E402
from pagesearch.searcher import PageSearcher  # noqa: E402


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Index page-marked text files for substring search"
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Text files to index (default: every file in the data directory)"
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing index and rebuild from scratch"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    return parser.parse_args()


def progress_callback(current: int, total: int, filename: str) -> None:
    """Print progress to console."""
    percent = (current / total) * 100 if total > 0 else 0
    bar_width = 30
    filled = int(bar_width * current / total) if total > 0 else 0
    bar = "=" * filled + "-" * (bar_width - filled)

    print(f"\r[{bar}] {percent:5.1f}% ({current}/{total}) {filename[:40]:<40}", end="", flush=True)


def main():
    """Main entry point for the indexer CLI."""
    args = parse_args()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            sys.exit(1)
        reload_config(config_path)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    logger = get_logger(__name__)

    print("=" * 60)
    print("Page Search - Indexer")
    print("=" * 60)
    print(f"Data directory:    {config.paths.data_directory}")
    print(f"Database path:     {config.paths.database_path}")
    print(f"Reset mode:        {args.reset}")
    print("=" * 60)

    if args.reset:
        response = input("This will DELETE all existing index data. Continue? [y/N] ")
        if response.lower() != "y":
            print("Aborted.")
            sys.exit(0)

    with PageSearcher(config=config, observer=LoggingObserver()) as searcher:
        if args.reset:
            reset_schema(searcher.manager)

        if args.files:
            failed = 0
            for filepath in args.files:
                try:
                    pages = searcher.index_file(filepath)
                    print(f"{filepath}: {pages} pages")
                except PageSearchError as e:
                    failed += 1
                    print(f"{filepath}: {e.message}")
                    logger.error(f"Failed to index {filepath}: {e.message}")
            sys.exit(1 if failed else 0)

        searcher.builder.progress_callback = None if args.quiet else progress_callback

        print("\nStarting indexing...\n")

        stats = searcher.index_directory()

    if not args.quiet:
        print("\n")

    print("=" * 60)
    print("Indexing Complete")
    print("=" * 60)
    print(f"Files scanned:     {stats.files_scanned:,}")
    print(f"Files indexed:     {stats.files_indexed:,}")
    print(f"Files failed:      {stats.files_failed:,}")
    print(f"Pages indexed:     {stats.pages_indexed:,}")
    print("=" * 60)

    if stats.errors:
        print(f"\nErrors ({len(stats.errors)}):")
        for error in stats.errors[:20]:
            print(f"  - {error}")
        if len(stats.errors) > 20:
            print(f"  ... and {len(stats.errors) - 20} more errors")

    sys.exit(1 if stats.files_failed > 0 else 0)


if __name__ == "__main__":
    main()
