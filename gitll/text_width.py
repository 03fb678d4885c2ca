"""Terminal column measurement for listing cells.

Combining marks take no columns and East Asian wide/fullwidth characters take
two, so columns of CJK or emoji names stay aligned.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return the terminal column width of one printable character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Total terminal columns occupied by ``text``."""
    return sum(char_display_width(ch) for ch in text)


def pad_to_width(text: str, width: int) -> str:
    """Append spaces until ``text`` occupies ``width`` columns."""
    return text + " " * max(0, width - display_width(text))
