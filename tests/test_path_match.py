"""Tests for segment-wise status matching and category precedence."""

from __future__ import annotations

import unittest
from pathlib import Path

from gitll.listing import Entry
from gitll.path_match import (
    StatusCategory,
    categorize_entries,
    category_for_code,
    category_for_path,
    is_sub_path,
)


class IsSubPathTests(unittest.TestCase):
    def test_file_under_directory_matches(self) -> None:
        self.assertTrue(is_sub_path("/repo/a/b.txt", "/repo/a/"))
        self.assertTrue(is_sub_path("/repo/a/b.txt", "/repo/a"))

    def test_exact_path_matches(self) -> None:
        self.assertTrue(is_sub_path("/repo/a.txt", "/repo/a.txt"))

    def test_raw_string_prefix_is_not_a_match(self) -> None:
        self.assertFalse(is_sub_path("/repo/ab.txt", "/repo/a"))
        self.assertFalse(is_sub_path("/repo/foobar/x", "/repo/foo/"))

    def test_collapsed_untracked_directory_covers_its_children(self) -> None:
        self.assertTrue(is_sub_path("/repo/newdir/", "/repo/newdir/inner.txt"))

    def test_sibling_paths_do_not_match(self) -> None:
        self.assertFalse(is_sub_path("/repo/a.txt", "/repo/sub/x.txt"))


class CategoryTests(unittest.TestCase):
    def test_category_for_code(self) -> None:
        self.assertIs(category_for_code("??"), StatusCategory.UNTRACKED)
        self.assertIs(category_for_code("A "), StatusCategory.ADDED)
        self.assertIs(category_for_code("AM"), StatusCategory.ADDED)
        self.assertIs(category_for_code(" M"), StatusCategory.MODIFIED)
        self.assertIs(category_for_code("MM"), StatusCategory.MODIFIED)
        self.assertIsNone(category_for_code(" D"))
        self.assertIsNone(category_for_code("R "))

    def test_added_outranks_modified_regardless_of_order(self) -> None:
        for status_map in (
            {"/repo/dir/a.txt": "A ", "/repo/dir/b.txt": " M"},
            {"/repo/dir/b.txt": " M", "/repo/dir/a.txt": "A "},
        ):
            self.assertIs(category_for_path("/repo/dir", status_map), StatusCategory.ADDED)

    def test_untracked_outranks_everything(self) -> None:
        status_map = {
            "/repo/dir/a.txt": "A ",
            "/repo/dir/c.txt": "??",
            "/repo/dir/b.txt": " M",
        }
        self.assertIs(category_for_path("/repo/dir", status_map), StatusCategory.UNTRACKED)

    def test_no_matching_record_means_no_category(self) -> None:
        self.assertIsNone(category_for_path("/repo/other", {"/repo/dir/a.txt": " M"}))


class CategorizeEntriesTests(unittest.TestCase):
    def test_keys_are_display_names(self) -> None:
        entries = [
            Entry("a.txt", Path("/repo/a.txt"), False),
            Entry("clean.txt", Path("/repo/clean.txt"), False),
            Entry("src", Path("/repo/src"), True),
        ]
        status_map = {"/repo/a.txt": " M", "/repo/src/new.py": "??"}
        self.assertEqual(
            categorize_entries(entries, status_map),
            {"a.txt": StatusCategory.MODIFIED, "src/": StatusCategory.UNTRACKED},
        )

    def test_missing_status_map_yields_no_highlights(self) -> None:
        entries = [Entry("a.txt", Path("/repo/a.txt"), False)]
        self.assertEqual(categorize_entries(entries, None), {})


if __name__ == "__main__":
    unittest.main()
