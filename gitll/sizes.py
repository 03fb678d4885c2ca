"""Human-readable sizes and recursive directory totals."""

from __future__ import annotations

import math
import os
from collections.abc import Callable
from pathlib import Path

SIZE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
SIZE_BASE = 1000.0


def to_human(size: int, emphasize: Callable[[str], str] = str) -> str:
    """Format ``size`` bytes with base-1000 units.

    Sizes under 10 bytes are shown verbatim; larger values are rounded to one
    decimal and printed with a decimal only when below 10. ``emphasize`` wraps
    the number (bold on terminals).
    """
    if size < 10:
        return f"  {emphasize(str(size))} B"
    exponent = min(int(math.floor(math.log(size) / math.log(SIZE_BASE))), len(SIZE_UNITS) - 1)
    value = math.floor(size / SIZE_BASE**exponent * 10 + 0.5) / 10
    number = f"{value:3.1f}" if value < 10 else f"{value:3.0f}"
    return f"{emphasize(number)} {SIZE_UNITS[exponent]}"


def dir_size(path: Path) -> int:
    """Sum sizes of all non-directory entries below ``path``.

    Symlinks are counted by their own size and never followed; entries that
    cannot be statted are skipped.
    """
    total = 0
    for root, dirnames, filenames in os.walk(path):
        for name in filenames:
            try:
                total += os.lstat(os.path.join(root, name)).st_size
            except OSError:
                continue
        for name in dirnames:
            candidate = os.path.join(root, name)
            if os.path.islink(candidate):
                try:
                    total += os.lstat(candidate).st_size
                except OSError:
                    continue
    return total
