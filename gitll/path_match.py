"""Map git status records onto listed entries.

Matching compares path segments, so ``foo`` never matches ``foobar``.
When several records hit one entry the highest-priority category wins.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from pathlib import PurePath

from .listing import Entry


class StatusCategory(enum.IntEnum):
    """Highlight category; larger values take precedence."""

    MODIFIED = 1
    ADDED = 2
    UNTRACKED = 3


# Checked in priority order.
_CODE_CATEGORIES: tuple[tuple[str, StatusCategory], ...] = (
    ("?", StatusCategory.UNTRACKED),
    ("A", StatusCategory.ADDED),
    ("M", StatusCategory.MODIFIED),
)


def _segments(path: str) -> tuple[str, ...]:
    return PurePath(path).parts


def is_sub_path(status_path: str, entry_path: str) -> bool:
    """Return whether ``status_path`` lies at or under ``entry_path``.

    A status path that is a complete segment prefix of ``entry_path`` also
    matches: git reports an untracked directory as one record, and everything
    listed inside it is untracked too.
    """
    status_parts = _segments(status_path)
    entry_parts = _segments(entry_path)
    shared = min(len(status_parts), len(entry_parts))
    if shared == 0:
        return False
    return status_parts[:shared] == entry_parts[:shared]


def category_for_code(code: str) -> StatusCategory | None:
    """Classify a two-character status code; ``None`` means no highlight."""
    for marker, category in _CODE_CATEGORIES:
        if marker in code[:2]:
            return category
    return None


def category_for_path(entry_path: str, status_map: Mapping[str, str]) -> StatusCategory | None:
    best: StatusCategory | None = None
    for status_path, code in status_map.items():
        category = category_for_code(code)
        if category is None or (best is not None and category <= best):
            continue
        if is_sub_path(status_path, entry_path):
            best = category
            if best is StatusCategory.UNTRACKED:
                break
    return best


def categorize_entries(
    entries: Iterable[Entry],
    status_map: Mapping[str, str] | None,
) -> dict[str, StatusCategory]:
    """Return ``{display name: category}`` for entries with a highlight.

    Entry paths must be absolute and symlink-free, like the paths git reports.
    """
    if not status_map:
        return {}
    categories: dict[str, StatusCategory] = {}
    for entry in entries:
        category = category_for_path(str(entry.path), status_map)
        if category is not None:
            categories[entry.display_name] = category
    return categories


__all__ = [
    "StatusCategory",
    "categorize_entries",
    "category_for_code",
    "category_for_path",
    "is_sub_path",
]
