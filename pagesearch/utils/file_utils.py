"""
File utility functions for the page search engine.

Provides size calculations and directory management.
"""

from pathlib import Path
from typing import Union


def get_file_size_mb(filepath: Union[str, Path]) -> float:
    """
    Get file size in megabytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in MB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / (1024 * 1024), 2)


def has_supported_extension(filepath: Union[str, Path], extensions) -> bool:
    """Check a path's suffix against a list like [".txt"], ignoring case."""
    suffix = Path(filepath).suffix.lower()
    return suffix in {ext.lower() for ext in extensions}


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Create directory tree if it doesn't exist.

    Args:
        path: Directory path to create.

    Returns:
        Path object of the directory.
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
