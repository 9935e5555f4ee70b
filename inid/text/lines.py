"""Line preprocessing for INI documents.

Responsibilities:
- Reduce raw text to significant lines: trimmed, non-empty, not comments.
- Classify header lines and locate section boundaries.
"""

from __future__ import annotations

from collections.abc import Sequence

COMMENT_MARKER = ";"
HEADER_OPEN = "["
HEADER_CLOSE = "]"


def significant_lines(text: str) -> list[str]:
    """Return trimmed lines in order, without blank lines and `;` comments."""

    stripped = (line.strip() for line in text.split("\n"))
    return [line for line in stripped if line and not line.startswith(COMMENT_MARKER)]


def is_section_header(line: str) -> bool:
    """Return whether a significant line is a bracketed section header."""

    return len(line) > 1 and line[0] == HEADER_OPEN and line[-1] == HEADER_CLOSE


def section_header_name(line: str) -> str:
    """Return the trimmed text between the brackets of a header line."""

    return line[1:-1].strip()


def find_next_header(lines: Sequence[str], start: int) -> int:
    """Return the index of the first line at or after `start` opening with `[`.

    Returns `len(lines)` when no such line exists. Only the first character is
    checked, so a stray `[...` line ends the current body as well.
    """

    for index in range(start, len(lines)):
        if lines[index].startswith(HEADER_OPEN):
            return index
    return len(lines)
