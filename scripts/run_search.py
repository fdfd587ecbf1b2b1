"""
CLI script to search the pages of one indexed file.

Usage:
    python scripts/run_search.py book.txt "all of"
    python scripts/run_search.py --list
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pagesearch.core import get_config, ConfigurationError, PageSearchError  # noqa: E402
from pagesearch.core.config_loader import reload_config  # noqa: E402
from pagesearch.searcher import PageSearcher  # noqa: E402


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search an indexed file for a phrase"
    )

    parser.add_argument("file", nargs="?", help="Indexed file key to search in")
    parser.add_argument("query", nargs="?", help="Phrase to look for")

    parser.add_argument(
        "--list",
        action="store_true",
        help="List indexed files and exit"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    args = parser.parse_args()
    if not args.list and (args.file is None or args.query is None):
        parser.error("file and query are required unless --list is given")

    return args


def main():
    """Main entry point for the search CLI."""
    args = parse_args()

    try:
        config = reload_config(Path(args.config)) if args.config else get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    with PageSearcher(config=config) as searcher:
        if args.list:
            for filepath in searcher.get_indexed_files():
                print(filepath)
            sys.exit(0)

        try:
            results = searcher.search(args.query, args.file)
        except PageSearchError as e:
            print(f"Search failed: {e.message}")
            sys.exit(1)

    print(f"{len(results)} pages found")
    for record in results:
        print("-" * 60)
        print(f"{record.filepath} pp {record.page}:")
        print(record.original_content.rstrip("\n"))


if __name__ == "__main__":
    main()
