"""Directory listing collaborator.

Produces name-sorted entries for one directory. Listing failures propagate as
``OSError`` so the CLI can report them and exit non-zero.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_name(name: str) -> str:
    """Escape terminal control characters so names cannot emit escape sequences."""
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", name)


@dataclass(frozen=True)
class Entry:
    """One child of a listed directory."""

    name: str
    path: Path
    is_dir: bool

    @property
    def display_name(self) -> str:
        """Name as printed: sanitized, with a trailing slash for directories."""
        name = sanitize_name(self.name)
        return f"{name}/" if self.is_dir else name


def stat_path(path: Path) -> os.stat_result:
    """Stat ``path`` following symlinks; raises ``OSError`` when it cannot."""
    return os.stat(path)


def list_entries(directory: Path) -> list[Entry]:
    """Return every child of ``directory`` (hidden ones included) sorted by name.

    Symlinks are never followed, so a link to a directory lists as a plain name.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as it:
        for dir_entry in it:
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            entries.append(Entry(name=dir_entry.name, path=Path(dir_entry.path), is_dir=is_dir))
    entries.sort(key=lambda entry: entry.name)
    return entries


__all__ = ["Entry", "list_entries", "sanitize_name", "stat_path"]
