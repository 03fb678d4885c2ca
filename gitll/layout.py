"""Column layout for directory listings.

Names fill columns top to bottom, then left to right. The column count starts
from a height-derived guess and shrinks until every row fits the terminal
width; a single column is always accepted.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .text_width import display_width, pad_to_width

COLUMN_SEPARATOR = "    "


@dataclass(frozen=True)
class LayoutGrid:
    """Column-major grid of names.

    ``names[i][j]`` is row ``j`` of column ``i``; exhausted columns hold ``""``
    placeholders. ``widths[i]`` is the widest name in column ``i``, in terminal
    columns.
    """

    names: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]
    row_count: int

    @property
    def column_count(self) -> int:
        return len(self.names)

    @property
    def columns(self) -> tuple[tuple[str, ...], ...]:
        """Cells padded to their column display width; placeholders stay empty."""
        return tuple(
            tuple(pad_to_width(name, width) if name else "" for name in column)
            for column, width in zip(self.names, self.widths)
        )

    def row_names(self, row: int) -> list[str]:
        """Names in ``row`` left to right, without trailing placeholders."""
        names = [column[row] for column in self.names]
        while names and names[-1] == "":
            names.pop()
        return names

    def row(
        self,
        row: int,
        separator: str = COLUMN_SEPARATOR,
        decorate: Callable[[str], str] | None = None,
    ) -> str:
        """Compose one output row.

        ``decorate`` sees the bare name; padding is appended afterwards. The
        last cell is left unpadded.
        """
        names = self.row_names(row)
        parts: list[str] = []
        for index, name in enumerate(names):
            text = decorate(name) if decorate is not None else name
            if index < len(names) - 1:
                text += " " * (self.widths[index] - display_width(name))
            parts.append(text)
        return separator.join(parts)

    def rows(self, separator: str = COLUMN_SEPARATOR) -> list[str]:
        return [self.row(row, separator) for row in range(self.row_count)]


def initial_column_count(entry_count: int, terminal_height: int) -> int:
    """Columns needed to fit ``entry_count`` names in half the terminal height."""
    half_height = max(1, terminal_height // 2)
    return entry_count // half_height + 1


def _build_grid(names: Sequence[str], columns: int) -> LayoutGrid:
    rows = math.ceil(len(names) / columns)
    built: list[tuple[str, ...]] = []
    widths: list[int] = []
    for start in range(0, len(names), rows):
        chunk = list(names[start:start + rows])
        widths.append(max(display_width(name) for name in chunk))
        chunk.extend([""] * (rows - len(chunk)))
        built.append(tuple(chunk))
    return LayoutGrid(names=tuple(built), widths=tuple(widths), row_count=rows)


def _fits(grid: LayoutGrid, width: int) -> bool:
    return all(display_width(row) <= width for row in grid.rows())


def fit_columns(names: Sequence[str], width: int, columns: int) -> LayoutGrid:
    """Lay out ``names`` in at most ``columns`` columns within ``width``.

    Wholly empty columns are dropped, so the grid may report fewer columns
    than requested even when the first attempt fits.
    """
    if not names:
        return LayoutGrid(names=(), widths=(), row_count=0)
    for count in range(columns, 1, -1):
        grid = _build_grid(names, count)
        if _fits(grid, width):
            return grid
    return _build_grid(names, 1)


__all__ = ["COLUMN_SEPARATOR", "LayoutGrid", "fit_columns", "initial_column_count"]
