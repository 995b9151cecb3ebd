"""End-to-end listing pipeline: status, collection, sorting, rendering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .entries import collect_rows
from .git_status import collect_git_status
from .sorting import sort_rows
from .table import render_table
from .ui_theme import resolve_theme


@dataclass(frozen=True)
class ListingOptions:
    """Validated options for one listing run."""

    path: Path
    show_hidden: bool = False
    sort_by_modified: bool = False
    reverse: bool = False
    show_git_status: bool = False
    no_color: bool = False
    theme: str | None = None


def render_listing(options: ListingOptions, now_ns: int | None = None) -> str:
    """Return the full table for ``options.path`` as printable text.

    Collection errors propagate as ``ListingError`` before anything is
    rendered. Git status is skipped silently when it is unavailable.
    """
    theme = resolve_theme(options.theme, no_color=options.no_color)
    status_map = collect_git_status(options.path) if options.show_git_status else None
    rows = collect_rows(
        options.path,
        options.show_hidden,
        status_map=status_map,
        theme=theme,
        now_ns=now_ns,
    )
    ordered = sort_rows(rows, by_modified=options.sort_by_modified, reverse=options.reverse)
    return "\n".join(render_table(ordered, theme)) + "\n"


__all__ = ["ListingOptions", "render_listing"]
