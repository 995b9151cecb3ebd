"""Bordered table rendering for listing rows.

Column widths come from visible cell text while the styled text is printed,
so color codes never shift alignment.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import Cell, colorize
from .entries import Row
from .ui_theme import DEFAULT_THEME, UITheme

# Box-drawing pieces: (left, junction, right) per border line.
TOP_BORDER = ("╭", "┬", "╮")
SEPARATOR_BORDER = ("├", "┼", "┤")
BOTTOM_BORDER = ("╰", "┴", "╯")
HORIZONTAL = "─"
VERTICAL = "│"


@dataclass(frozen=True)
class Column:
    header: str
    align_right: bool = False


COLUMNS: tuple[Column, ...] = (
    Column("#", align_right=True),
    Column("name"),
    Column("type"),
    Column("size", align_right=True),
    Column("modified"),
)


def _row_cells(index: int, row: Row, theme: UITheme) -> tuple[Cell, ...]:
    return (
        Cell.colored(str(index), theme.index, theme.reset),
        row.name,
        row.kind,
        row.size,
        row.modified,
    )


def column_widths(rows: list[Row]) -> list[int]:
    """Return the visible width of each column, never below its header."""
    widths = [len(column.header) for column in COLUMNS]
    if rows:
        widths[0] = max(widths[0], len(str(len(rows) - 1)))
    for row in rows:
        for col_idx, cell in enumerate((row.name, row.kind, row.size, row.modified), start=1):
            widths[col_idx] = max(widths[col_idx], cell.width)
    return widths


def _border_line(widths: list[int], pieces: tuple[str, str, str], theme: UITheme) -> str:
    left, junction, right = pieces
    segments = [HORIZONTAL * (width + 2) for width in widths]
    return colorize(f"{left}{junction.join(segments)}{right}", theme.border, theme.reset)


def _content_line(cells: tuple[Cell, ...], widths: list[int], theme: UITheme) -> str:
    bar = colorize(VERTICAL, theme.border, theme.reset)
    parts = [
        f" {cell.padded(width, column.align_right)} "
        for cell, width, column in zip(cells, widths, COLUMNS)
    ]
    return f"{bar}{bar.join(parts)}{bar}"


def render_table(rows: list[Row], theme: UITheme | None = None) -> list[str]:
    """Render ``rows`` as bordered table lines, indexed from zero."""
    active_theme = theme or DEFAULT_THEME
    widths = column_widths(rows)
    header_cells = tuple(Cell.colored(column.header, active_theme.header, active_theme.reset) for column in COLUMNS)

    lines = [
        _border_line(widths, TOP_BORDER, active_theme),
        _content_line(header_cells, widths, active_theme),
        _border_line(widths, SEPARATOR_BORDER, active_theme),
    ]
    for index, row in enumerate(rows):
        lines.append(_content_line(_row_cells(index, row, active_theme), widths, active_theme))
    lines.append(_border_line(widths, BOTTOM_BORDER, active_theme))
    return lines


__all__ = [
    "COLUMNS",
    "Column",
    "column_widths",
    "render_table",
]
