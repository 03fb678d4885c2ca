"""Command-line front door for gitll.

Parses CLI options, resolves target paths, and prints column listings with
git status colors. Piped output degrades to a plain one-name-per-line listing.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from .config import load_no_color, load_theme_name
from .git_status import collect_git_status
from .layout import fit_columns, initial_column_count
from .listing import Entry, list_entries, sanitize_name, stat_path
from .path_match import categorize_entries
from .render import format_size_line, render_grid
from .sizes import dir_size, to_human
from .spinner import Spinner
from .terminal import is_interactive, terminal_size
from .theme import ColorTheme, available_theme_names, category_formats, emphasize, resolve_theme

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitll",
        description="List directory contents in columns, colored by git status.",
    )
    parser.add_argument("paths", nargs="*", help="Files or directories. Defaults to current directory.")
    parser.add_argument("-1", dest="one_column", action="store_true", help="List one entry per line.")
    parser.add_argument("-s", "--summary", action="store_true", help="Print total size for each path instead.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log git and terminal fallbacks to stderr.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _stat_or_exit(path: Path):
    try:
        return stat_path(path)
    except OSError as exc:
        raise SystemExit(str(exc)) from exc


def format_directory_listing(
    directory: Path,
    entries: list[Entry],
    *,
    width: int,
    height: int,
    theme: ColorTheme | None,
    one_column: bool = False,
) -> str:
    """Lay out and color ``entries`` of ``directory``.

    ``directory`` should be symlink-free so entry paths line up with the
    paths git reports.

    ``theme=None`` means plain output: no git lookup and no escape sequences.
    """
    names = [entry.display_name for entry in entries]
    columns = 1 if one_column else initial_column_count(len(names), height)
    grid = fit_columns(names, width, columns)
    if theme is None:
        return render_grid(grid)

    categories = categorize_entries(entries, collect_git_status(directory))
    return render_grid(grid, categories, category_formats(theme))


def print_directory(directory: Path, out: TextIO, theme: ColorTheme | None, one_column: bool) -> None:
    real_directory = Path(os.path.realpath(directory))
    try:
        entries = list_entries(real_directory)
    except OSError as exc:
        raise SystemExit(str(exc)) from exc
    if not entries:
        return

    width, height = terminal_size(out)
    if not is_interactive(out):
        one_column = True
    out.write(
        format_directory_listing(
            real_directory,
            entries,
            width=width,
            height=height,
            theme=theme,
            one_column=one_column,
        )
        + "\n"
    )


def print_summary(path: Path, out: TextIO, theme: ColorTheme | None) -> None:
    """Print ``<size>\\t<name>`` for ``path``; directories are summed recursively."""
    info = _stat_or_exit(path)
    name = sanitize_name(path.name or str(path))
    if path.is_dir():
        name += "/"
        if is_interactive(out):
            with Spinner(name, out):
                size = dir_size(path)
        else:
            size = dir_size(path)
    else:
        size = info.st_size
    out.write(format_size_line(to_human(size, emphasize(theme)), name) + "\n")


def run(paths: list[Path], out: TextIO, theme: ColorTheme | None, *, one_column: bool, summary: bool) -> None:
    """List every path in order, with headers when more than one is given."""
    show_headers = len(paths) > 1
    printed_block = False
    for path in paths:
        _stat_or_exit(path)
        if summary or not path.is_dir():
            print_summary(path, out, theme)
            continue
        if show_headers:
            if printed_block:
                out.write("\n")
            out.write(f"{sanitize_name(str(path))}:\n")
            printed_block = True
        print_directory(path, out, theme, one_column)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list each requested path.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = _build_parser().parse_args()
    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    paths = [Path(os.path.abspath(raw)) for raw in args.paths] or [Path(os.path.abspath(default_path))]

    out = sys.stdout
    colored = is_interactive(out) and not args.no_color and not load_no_color()
    theme = resolve_theme(args.theme or load_theme_name()) if colored else None
    if not is_interactive(out):
        logger.debug("stdout is not a terminal; plain single-column output")

    run(paths, out, theme, one_column=args.one_column, summary=args.summary)


if __name__ == "__main__":
    main()
