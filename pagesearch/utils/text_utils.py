"""
Text utility functions for the page search engine.

Provides the canonical search-key transform shared by indexing and
search, plus small helpers for line cleanup and display truncation.
"""

import unicodedata


def canonicalize(text: str) -> str:
    """
    Map text to its canonical search form.

    Applies NFKD compatibility decomposition so accented and ligature
    characters split into base letters plus combining marks, then keeps
    only letters and decimal digits, lowercased. Everything else
    (marks, punctuation, symbols, whitespace) is dropped without a
    separator.

    Example:
        "Año tras=añoÇ" -> "anotrasanoc"

    Args:
        text: Arbitrary Unicode text.

    Returns:
        Canonical string, empty for empty input.
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFKD", text)

    result = []
    for char in decomposed:
        if char.isalpha() or char.isdecimal():
            # lower() may expand a letter into several code points
            result.extend(c for c in char.lower() if c.isalpha() or c.isdecimal())

    return "".join(result)


def clean_line(line: str) -> str:
    """Strip surrounding whitespace, including the line terminator."""
    return line.strip()


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including suffix.
        suffix: String to append when truncated.

    Returns:
        Truncated text or original if within limit.
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix[:max_length]

    # Try to break at word boundary
    truncated = text[:truncate_at]
    last_space = truncated.rfind(" ")

    if last_space > truncate_at * 0.7:
        truncated = truncated[:last_space]

    return truncated + suffix
