"""Row ordering for the listing table."""

from __future__ import annotations

from .entries import Row


def _name_key(row: Row) -> str:
    return row.name.text.lower()


def _default_key(row: Row) -> tuple[bool, str]:
    return (not row.entry.is_dir, _name_key(row))


def _modified_key(row: Row) -> tuple[bool, int, str]:
    mtime_ns = row.entry.mtime_ns
    if mtime_ns is None:
        return (True, 0, _name_key(row))
    return (False, -mtime_ns, _name_key(row))


def sort_rows(rows: list[Row], by_modified: bool = False, reverse: bool = False) -> list[Row]:
    """Return ``rows`` ordered for display.

    The default order puts directories first, then compares names
    case-insensitively (status suffix included). ``by_modified`` ignores kind:
    known timestamps come first, newest to oldest, ties by name. ``reverse``
    flips the finished order as a whole.
    """
    ordered = sorted(rows, key=_modified_key if by_modified else _default_key)
    if reverse:
        ordered.reverse()
    return ordered


__all__ = ["sort_rows"]
