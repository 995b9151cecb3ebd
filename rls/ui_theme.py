"""Color palettes for the listing table.

Themes are fixed ANSI palettes selected once per run. ``plain`` is used when
color output is disabled and renders every cell without escape codes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .timefmt import Recency


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the entry collector and table renderer."""

    name: str
    reset: str
    border: str
    header: str
    index: str
    directory: str
    dotfile: str
    executable: str
    warning: str
    file_default: str
    size: str
    type_dir: str
    type_file: str
    time_future: str
    time_just_now: str
    time_seconds: str
    time_minutes: str
    time_hours: str
    time_days: str
    time_weeks: str
    time_months: str
    time_years: str
    time_unknown: str
    status_added: str
    status_deleted: str
    status_untracked: str
    status_dirty: str
    status_clean: str

    def recency_color(self, recency: Recency) -> str:
        """Return the modified-column color for ``recency``."""
        return {
            Recency.FUTURE: self.time_future,
            Recency.JUST_NOW: self.time_just_now,
            Recency.SECONDS: self.time_seconds,
            Recency.MINUTES: self.time_minutes,
            Recency.HOURS: self.time_hours,
            Recency.DAYS: self.time_days,
            Recency.WEEKS: self.time_weeks,
            Recency.MONTHS: self.time_months,
            Recency.YEARS: self.time_years,
            Recency.UNKNOWN: self.time_unknown,
        }[recency]


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    header="\033[1;32m",
    index="\033[2;38;5;250m",
    directory="\033[1;34m",
    dotfile="\033[38;5;244m",
    executable="\033[1;32m",
    warning="\033[33m",
    file_default="\033[38;5;252m",
    size="\033[38;5;109m",
    type_dir="\033[34m",
    type_file="\033[38;5;250m",
    time_future="\033[1;35m",
    time_just_now="\033[1;38;5;46m",
    time_seconds="\033[38;5;46m",
    time_minutes="\033[38;5;82m",
    time_hours="\033[38;5;118m",
    time_days="\033[38;5;226m",
    time_weeks="\033[38;5;214m",
    time_months="\033[38;5;208m",
    time_years="\033[38;5;244m",
    time_unknown="\033[2m",
    status_added="\033[32m",
    status_deleted="\033[31m",
    status_untracked="\033[38;5;42m",
    status_dirty="\033[38;5;214m",
    status_clean="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    header="\033[1;38;5;45m",
    index="\033[2;38;5;110m",
    directory="\033[1;38;5;45m",
    dotfile="\033[38;5;67m",
    executable="\033[1;38;5;84m",
    warning="\033[38;5;215m",
    file_default="\033[38;5;252m",
    size="\033[38;5;73m",
    type_dir="\033[38;5;39m",
    type_file="\033[38;5;153m",
    time_future="\033[1;38;5;177m",
    time_just_now="\033[1;38;5;51m",
    time_seconds="\033[38;5;51m",
    time_minutes="\033[38;5;45m",
    time_hours="\033[38;5;39m",
    time_days="\033[38;5;33m",
    time_weeks="\033[38;5;32m",
    time_months="\033[38;5;31m",
    time_years="\033[38;5;24m",
    time_unknown="\033[2;38;5;110m",
    status_added="\033[38;5;84m",
    status_deleted="\033[38;5;203m",
    status_untracked="\033[38;5;84m",
    status_dirty="\033[38;5;215m",
    status_clean="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    header="",
    index="",
    directory="",
    dotfile="",
    executable="",
    warning="",
    file_default="",
    size="",
    type_dir="",
    type_file="",
    time_future="",
    time_just_now="",
    time_seconds="",
    time_minutes="",
    time_hours="",
    time_days="",
    time_weeks="",
    time_months="",
    time_years="",
    time_unknown="",
    status_added="",
    status_deleted="",
    status_untracked="",
    status_dirty="",
    status_clean="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
