"""Terminal queries with safe fallbacks."""

from __future__ import annotations

import os
from typing import TextIO

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 60


def terminal_size(stream: TextIO) -> tuple[int, int]:
    """Return ``(width, height)`` of the terminal behind ``stream``.

    Falls back to 80x60 when the stream is not a terminal or the query fails.
    """
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    if size.columns <= 0 or size.lines <= 0:
        return DEFAULT_WIDTH, DEFAULT_HEIGHT
    return size.columns, size.lines


def is_interactive(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a terminal."""
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False
