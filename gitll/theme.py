"""Color themes for git status highlights.

Themes are static SGR palettes chosen once per run. ``default`` reproduces the
classic ll colors; ``muted`` uses the 256-color palette.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .path_match import StatusCategory


@dataclass(frozen=True)
class ColorTheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    modified: str
    added: str
    untracked: str
    bold: str
    reset: str = "\033[0m"

    def wrap(self, prefix: str, text: str) -> str:
        return f"{prefix}{text}{self.reset}"


DEFAULT_THEME = ColorTheme(
    name="default",
    modified="\033[1;34m",
    added="\033[0;32m",
    untracked="\033[0;36m",
    bold="\033[1m",
)

MUTED_THEME = ColorTheme(
    name="muted",
    modified="\033[38;5;214m",
    added="\033[38;5;114m",
    untracked="\033[38;5;42m",
    bold="\033[1;38;5;252m",
)

THEMES: dict[str, ColorTheme] = {theme.name: theme for theme in (DEFAULT_THEME, MUTED_THEME)}


def available_theme_names() -> list[str]:
    return sorted(THEMES)


def resolve_theme(name: str | None) -> ColorTheme:
    """Return the named theme, or the default one for unknown names."""
    if not name:
        return DEFAULT_THEME
    return THEMES.get(name.strip().lower(), DEFAULT_THEME)


def category_formats(theme: ColorTheme) -> dict[StatusCategory, Callable[[str], str]]:
    """Map each highlight category to a function wrapping text in its color."""
    prefixes = {
        StatusCategory.UNTRACKED: theme.untracked,
        StatusCategory.ADDED: theme.added,
        StatusCategory.MODIFIED: theme.modified,
    }
    return {category: (lambda text, prefix=prefix: theme.wrap(prefix, text)) for category, prefix in prefixes.items()}


def emphasize(theme: ColorTheme | None) -> Callable[[str], str]:
    """Return a bold wrapper for ``theme``, or identity when colors are off."""
    if theme is None:
        return str
    return lambda text: theme.wrap(theme.bold, text)


__all__ = [
    "ColorTheme",
    "DEFAULT_THEME",
    "MUTED_THEME",
    "THEMES",
    "available_theme_names",
    "category_formats",
    "emphasize",
    "resolve_theme",
]
