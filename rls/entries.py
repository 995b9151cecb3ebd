"""Directory enumeration into display-ready listing rows.

Each direct child becomes an immutable ``Entry`` plus a ``Row`` carrying the
colored cells for the table. Any metadata failure aborts the whole listing.
"""

from __future__ import annotations

import os
import stat
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .ansi import Cell
from .errors import DirectoryReadError, EntryReadError
from .git_status import StatusRecord, format_status_suffix
from .sizefmt import format_size
from .timefmt import relative_time
from .ui_theme import DEFAULT_THEME, UITheme

DOCUMENT_SUFFIXES = frozenset(
    {
        ".md",
        ".markdown",
        ".rst",
        ".txt",
        ".adoc",
        ".toml",
        ".yaml",
        ".yml",
        ".json",
        ".ini",
        ".cfg",
        ".conf",
        ".lock",
        ".nix",
    }
)


class EntryKind(Enum):
    DIRECTORY = "dir"
    FILE = "file"


@dataclass(frozen=True)
class Entry:
    """Metadata observed for one directory child."""

    name: str
    kind: EntryKind
    size: int
    mtime_ns: int | None
    executable: bool
    hidden: bool

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Row:
    """One table row: the entry plus its rendered cells."""

    entry: Entry
    name: Cell
    kind: Cell
    size: Cell
    modified: Cell


def _is_executable(mode: int) -> bool:
    if os.name != "posix":
        return False
    return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def read_entry(dir_entry: os.DirEntry[str]) -> Entry:
    """Build an ``Entry`` from a scandir result without following symlinks."""
    try:
        is_dir = dir_entry.is_dir(follow_symlinks=False)
        st = dir_entry.stat(follow_symlinks=False)
    except OSError as exc:
        raise EntryReadError(Path(dir_entry.path), exc.strerror or str(exc)) from exc

    return Entry(
        name=dir_entry.name,
        kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
        size=int(st.st_size),
        mtime_ns=int(st.st_mtime_ns),
        executable=_is_executable(st.st_mode),
        hidden=dir_entry.name.startswith("."),
    )


def name_color_for(entry: Entry, theme: UITheme | None = None) -> str:
    """Return the ANSI color for an entry name.

    Precedence: directory, dotfile, executable, documentation/config suffix,
    then the default file color.
    """
    active_theme = theme or DEFAULT_THEME
    if entry.is_dir:
        return active_theme.directory
    if entry.hidden:
        return active_theme.dotfile
    if entry.executable:
        return active_theme.executable
    if Path(entry.name).suffix.lower() in DOCUMENT_SUFFIXES:
        return active_theme.warning
    return active_theme.file_default


def build_row(
    entry: Entry,
    status: StatusRecord | None = None,
    theme: UITheme | None = None,
    now_ns: int | None = None,
) -> Row:
    """Derive the display cells for ``entry``."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset

    name = Cell.colored(entry.name, name_color_for(entry, active_theme), reset)
    if status is not None:
        # A clean record has no visible text, so join leaves the name as is.
        name = name.join(format_status_suffix(status, active_theme))

    if entry.is_dir:
        kind = Cell.colored(entry.kind.value, active_theme.type_dir, reset)
        size = Cell.colored("-", active_theme.size, reset)
    else:
        kind = Cell.colored(entry.kind.value, active_theme.type_file, reset)
        size = Cell.colored(format_size(entry.size), active_theme.size, reset)

    label, recency = relative_time(entry.mtime_ns, now_ns)
    modified = Cell.colored(label, active_theme.recency_color(recency), reset)
    return Row(entry=entry, name=name, kind=kind, size=size, modified=modified)


def collect_rows(
    directory: Path,
    show_hidden: bool,
    status_map: dict[str, StatusRecord] | None = None,
    theme: UITheme | None = None,
    now_ns: int | None = None,
) -> list[Row]:
    """List the direct children of ``directory`` as unsorted rows.

    Raises ``DirectoryReadError`` when the directory cannot be enumerated and
    ``EntryReadError`` when one child's metadata cannot be read.
    """
    if now_ns is None:
        now_ns = time.time_ns()

    rows: list[Row] = []
    try:
        with os.scandir(directory) as dir_entries:
            for dir_entry in dir_entries:
                if not show_hidden and dir_entry.name.startswith("."):
                    continue
                entry = read_entry(dir_entry)
                status = status_map.get(entry.name) if status_map is not None else None
                rows.append(build_row(entry, status, theme, now_ns))
    except OSError as exc:
        raise DirectoryReadError(directory, exc.strerror or str(exc)) from exc
    return rows


__all__ = [
    "DOCUMENT_SUFFIXES",
    "Entry",
    "EntryKind",
    "Row",
    "build_row",
    "collect_rows",
    "name_color_for",
    "read_entry",
]
