"""Compose colored listing rows from a layout grid.

Colors wrap only the bare name; column padding follows the reset so highlight
never bleeds into the gap between columns.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .layout import COLUMN_SEPARATOR, LayoutGrid
from .path_match import StatusCategory


def render_grid(
    grid: LayoutGrid,
    categories: Mapping[str, StatusCategory] | None = None,
    formats: Mapping[StatusCategory, Callable[[str], str]] | None = None,
    separator: str = COLUMN_SEPARATOR,
) -> str:
    """Return one line per grid row, joined with newlines.

    ``categories`` maps names to their highlight; names missing from it, or
    categories missing from ``formats``, are emitted unformatted.
    """
    categories = categories or {}
    formats = formats or {}

    def decorate(name: str) -> str:
        category = categories.get(name)
        formatter = formats.get(category) if category is not None else None
        return formatter(name) if formatter is not None else name

    return "\n".join(grid.row(row, separator, decorate) for row in range(grid.row_count))


def format_size_line(size_text: str, name: str) -> str:
    """One summary line: humanized size, a tab, then the name."""
    return f"{size_text}\t{name}"


__all__ = ["format_size_line", "render_grid"]
