"""Column-fitting tests for ``gitll.layout``.

Covers column shrinking, single-column fallback, and padding invariants.
"""

from __future__ import annotations

import unittest

from gitll.layout import COLUMN_SEPARATOR, LayoutGrid, fit_columns, initial_column_count
from gitll.text_width import display_width


class InitialColumnCountTests(unittest.TestCase):
    def test_uses_half_terminal_height(self) -> None:
        self.assertEqual(initial_column_count(10, 60), 1)
        self.assertEqual(initial_column_count(61, 60), 3)

    def test_tiny_height_does_not_divide_by_zero(self) -> None:
        self.assertEqual(initial_column_count(4, 1), 5)
        self.assertEqual(initial_column_count(4, 0), 5)


class FitColumnsTests(unittest.TestCase):
    def test_short_names_fit_in_requested_columns(self) -> None:
        grid = fit_columns(["a.txt", "bb.txt", "ccc/"], 40, 3)
        self.assertEqual(grid.column_count, 3)
        self.assertEqual(grid.row_count, 1)
        self.assertEqual(grid.rows(), ["a.txt    bb.txt    ccc/"])

    def test_shrinks_columns_until_rows_fit(self) -> None:
        names = [f"file{idx:02d}.x" for idx in range(10)]
        grid = fit_columns(names, 30, 5)
        self.assertEqual(grid.column_count, 2)
        self.assertEqual(grid.row_count, 5)
        self.assertEqual(grid.rows()[0], "file00.x    file05.x")
        for row in grid.rows():
            self.assertLessEqual(len(row), 30)

    def test_fills_columns_top_to_bottom(self) -> None:
        grid = fit_columns(["a", "b", "c", "d", "e"], 80, 2)
        self.assertEqual(grid.columns, (("a", "b", "c"), ("d", "e", "")))
        self.assertEqual(grid.rows(), ["a    d", "b    e", "c"])

    def test_single_column_accepted_even_when_too_wide(self) -> None:
        wide = "x" * 50
        grid = fit_columns([wide, "y"], 10, 3)
        self.assertEqual(grid.column_count, 1)
        self.assertEqual(grid.rows(), [wide, "y"])

    def test_cells_in_a_column_share_one_width(self) -> None:
        grid = fit_columns(["a", "bbb", "cc", "d", "eeeee"], 100, 2)
        first, second = grid.columns
        self.assertEqual({len(cell) for cell in first}, {3})
        self.assertEqual({len(cell) for cell in second if cell}, {5})
        self.assertEqual(second[-1], "")
        self.assertEqual(grid.rows(), ["a      d", "bbb    eeeee", "cc"])

    def test_wide_characters_are_measured_in_terminal_columns(self) -> None:
        grid = fit_columns(["日", "abcd", "x"], 80, 2)
        self.assertEqual(grid.widths, (4, 1))
        self.assertEqual({display_width(cell) for cell in grid.columns[0]}, {4})
        self.assertEqual(grid.rows(), ["日      x", "abcd"])

    def test_wide_names_that_overflow_fall_back_to_fewer_columns(self) -> None:
        wide = "日本語日本語"
        self.assertLessEqual(len(wide) + len(COLUMN_SEPARATOR) + 1, 14)
        grid = fit_columns([wide, "x"], 14, 2)
        self.assertEqual(grid.column_count, 1)

    def test_empty_columns_are_dropped(self) -> None:
        grid = fit_columns(["a", "b", "c", "d", "e"], 80, 4)
        self.assertEqual(grid.column_count, 3)
        self.assertEqual(grid.row_count, 2)

    def test_empty_input_produces_empty_grid(self) -> None:
        grid = fit_columns([], 80, 3)
        self.assertEqual(grid, LayoutGrid(names=(), widths=(), row_count=0))
        self.assertEqual(grid.rows(), [])

    def test_layout_is_deterministic(self) -> None:
        names = [f"name_{idx}" for idx in range(37)]
        self.assertEqual(fit_columns(names, 72, 6), fit_columns(names, 72, 6))

    def test_rows_never_exceed_width_unless_single_column(self) -> None:
        names = ["alpha", "beta/", "gamma.py", "delta_long_name.txt", "e", "zeta", "eta", "theta.md"]
        longest = max(len(name) for name in names)
        for width in range(longest + len(COLUMN_SEPARATOR), 120, 7):
            for columns in range(1, 9):
                grid = fit_columns(names, width, columns)
                self.assertGreaterEqual(grid.column_count, 1)
                self.assertLessEqual(grid.column_count, columns)
                for row in grid.rows():
                    self.assertLessEqual(len(row), width)
                flattened = [name for column in grid.names for name in column if name]
                self.assertEqual(flattened, names)


if __name__ == "__main__":
    unittest.main()
