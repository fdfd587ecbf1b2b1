"""
Utility module providing shared helper functions.

Contains the canonical text transform and file helpers used across
the application. Depends on nothing else in the package.
"""

from .file_utils import (
    get_file_size_mb,
    has_supported_extension,
    ensure_directory
)
from .text_utils import (
    canonicalize,
    clean_line,
    truncate_text
)

__all__ = [
    "get_file_size_mb",
    "has_supported_extension",
    "ensure_directory",
    "canonicalize",
    "clean_line",
    "truncate_text"
]
