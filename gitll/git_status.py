"""Git status index for listing highlights.

Runs ``git status --porcelain=v1`` and maps each record to an absolute path.
Any git failure degrades to ``None`` so listings render without highlights.
"""

from __future__ import annotations

import codecs
import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

_RENAME_SEPARATOR = " -> "


def _run_git(directory: Path | str, args: list[str]) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(directory), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.debug("git %s failed to start: %s", " ".join(args), exc)
        return None


def _unquote_path(path_text: str) -> str:
    """Undo git's C-style quoting of unusual paths (``"a b.txt"``, ``"\\303\\251"``)."""
    if len(path_text) < 2 or not (path_text.startswith('"') and path_text.endswith('"')):
        return path_text
    raw = codecs.escape_decode(path_text[1:-1].encode("utf-8"))[0]
    return raw.decode("utf-8", errors="replace")


def parse_porcelain_status(output: str, repo_root: str) -> dict[str, str]:
    """Build ``{absolute path: two-character code}`` from porcelain v1 text.

    Each line is ``XY path`` relative to ``repo_root``. Blank and truncated
    lines are skipped. Renames and copies index their destination path.
    """
    status: dict[str, str] = {}
    for line in output.split("\n"):
        if len(line) < 4:
            continue
        code = line[:2]
        path_text = line[3:]
        if ("R" in code or "C" in code) and _RENAME_SEPARATOR in path_text:
            path_text = path_text.split(_RENAME_SEPARATOR, 1)[1]
        path_text = _unquote_path(path_text)
        if not path_text:
            continue
        status[os.path.join(repo_root, path_text)] = code
    return status


def resolve_repo_root(directory: Path | str) -> str | None:
    """Return the work-tree root containing ``directory`` or ``None``."""
    proc = _run_git(directory, ["rev-parse", "--show-toplevel"])
    if proc is None or proc.returncode != 0:
        logger.debug("no git work tree at %s", directory)
        return None
    root = proc.stdout.strip("\n")
    return root or None


def collect_git_status(directory: Path | str) -> dict[str, str] | None:
    """Return the status map for the repository holding ``directory``.

    ``None`` means no status information is available (git missing, not a
    repository, or ``git status`` failed).
    """
    repo_root = resolve_repo_root(directory)
    if repo_root is None:
        return None

    proc = _run_git(repo_root, ["status", "--porcelain=v1", "--untracked-files=normal"])
    if proc is None or proc.returncode != 0:
        logger.debug("git status failed in %s", repo_root)
        return None

    status = parse_porcelain_status(proc.stdout, repo_root)
    logger.debug("collected %d git status records from %s", len(status), repo_root)
    return status


__all__ = ["collect_git_status", "parse_porcelain_status", "resolve_repo_root"]
