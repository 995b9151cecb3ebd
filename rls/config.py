"""Read-only JSON config for listing defaults.

Stores default hidden-file, git-status, sort and theme preferences.
All access is defensive: malformed or missing config falls back safely, and
the file is never written by the tool.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "rls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    """Defaults applied before command-line flags."""

    show_hidden: bool = False
    show_git_status: bool = False
    sort_by_modified: bool = False
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans are accepted; anything else reads as ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_theme_name(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_listing_defaults() -> ListingDefaults:
    """Return listing defaults from the config file."""
    data = load_config()
    return ListingDefaults(
        show_hidden=_load_bool(data, "show_hidden"),
        show_git_status=_load_bool(data, "show_git_status"),
        sort_by_modified=_load_bool(data, "sort_by_modified"),
        theme=_load_theme_name(data),
    )


__all__ = [
    "CONFIG_PATH",
    "ListingDefaults",
    "load_config",
    "load_listing_defaults",
]
