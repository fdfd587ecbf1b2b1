"""
Parser for page-marked text streams.

Input is plain text where each page is delimited by sentinel lines:

    START OF PAGE 12
    ...page text...
    END OF PAGE 12

Every other line is trimmed and, when non-empty, appended to the
current page buffer followed by a newline.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..core import PageParseError, ProgressObserver
from ..utils import clean_line

START_MARKER = "START OF PAGE "
END_MARKER = "END OF PAGE "

_PAGE_NUMBER = re.compile(r"\d+")

FIRST_PAGE = 1


def _is_marker(line: str, marker: str) -> bool:
    return line.startswith(marker) or line == marker.rstrip()


@dataclass
class ParsedPage:
    """One closed page: its number and newline-joined trimmed lines."""
    page: int
    original_content: str


def parse_page_number(marker_line: str, filepath: str = None, line_number: int = None) -> int:
    """
    Extract N from a "START OF PAGE N" line.

    Raises:
        PageParseError: If N is not a base-10 integer.
    """
    argument = marker_line[len(START_MARKER):].strip()

    if not _PAGE_NUMBER.fullmatch(argument):
        raise PageParseError(
            f"Malformed page number in marker: {marker_line!r}",
            filepath=filepath,
            line_number=line_number,
            line=marker_line
        )

    return int(argument)


def parse_pages(
    lines: Iterable[str],
    filepath: str = None,
    observer: Optional[ProgressObserver] = None,
    flush_unterminated: bool = True
) -> Iterator[ParsedPage]:
    """
    Split a line stream into pages.

    Pages are yielded as soon as they close, so a consumer that stores
    each one keeps everything before a later parse error.

    A page closes on an END OF PAGE line, even with an empty buffer.
    Text after an END belongs to the page the next START opens, so a
    running header between pages never forms a record of its own. With
    flush_unterminated, a page that was opened but never ended closes
    on the next START OF PAGE line or at end of stream; without it,
    that text carries over into the next page or is dropped at the end.
    Text after the last END is dropped in both modes.

    Args:
        lines: Text lines, with or without trailing newlines.
        filepath: File key, used in observer events and errors.
        observer: Receives page_found events.
        flush_unterminated: Close pages that lack an END marker.

    Yields:
        ParsedPage for each closed page, in stream order.

    Raises:
        PageParseError: On a START marker with a malformed page number.
    """
    observer = observer or ProgressObserver()

    current_page = FIRST_PAGE
    buffer = []
    # True between an END and the next START
    ended = False

    for line_number, raw_line in enumerate(lines, start=1):
        line = clean_line(raw_line)

        if _is_marker(line, START_MARKER):
            page = parse_page_number(line, filepath, line_number)

            if flush_unterminated and buffer and not ended:
                yield ParsedPage(current_page, "".join(buffer))
                buffer = []

            current_page = page
            ended = False
            observer.page_found(filepath, current_page)
            continue

        if _is_marker(line, END_MARKER):
            yield ParsedPage(current_page, "".join(buffer))
            buffer = []
            ended = True
            continue

        if line:
            buffer.append(line + "\n")

    if flush_unterminated and buffer and not ended:
        yield ParsedPage(current_page, "".join(buffer))
