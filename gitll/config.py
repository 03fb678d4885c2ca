"""Persistent JSON config helpers.

Reads the preferred color theme and a colorless-output default.
Access is read-only and defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "gitll"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Return the configured theme name; non-string values are ignored."""
    value = load_config().get("theme")
    return value if isinstance(value, str) and value else None


def load_no_color() -> bool:
    """Only an explicit boolean ``true`` disables colors."""
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False
