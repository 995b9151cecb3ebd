"""ANSI-aware text measurement and table-cell values.

Colored text carries escape sequences that occupy no terminal columns.
``Cell`` keeps the visible text next to its styled rendition so layout code
measures one and prints the other.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies once printed."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def colorize(text: str, color: str, reset: str) -> str:
    """Wrap ``text`` in ``color``/``reset`` unless color is disabled or text empty."""
    if not color or not text:
        return text
    return f"{color}{text}{reset}"


@dataclass(frozen=True)
class Cell:
    """Visible text plus the escape-coded string printed for it."""

    text: str
    styled: str

    @classmethod
    def plain(cls, text: str) -> "Cell":
        return cls(text=text, styled=text)

    @classmethod
    def colored(cls, text: str, color: str, reset: str) -> "Cell":
        return cls(text=text, styled=colorize(text, color, reset))

    @property
    def width(self) -> int:
        return display_width(self.text)

    def join(self, other: "Cell", sep: str = " ") -> "Cell":
        """Concatenate two cells, skipping ``sep`` when either side is empty."""
        if not other.text:
            return self
        if not self.text:
            return other
        return Cell(text=f"{self.text}{sep}{other.text}", styled=f"{self.styled}{sep}{other.styled}")

    def padded(self, width: int, align_right: bool = False) -> str:
        """Return the styled text padded to ``width`` visible columns."""
        fill = " " * max(0, width - self.width)
        if align_right:
            return f"{fill}{self.styled}"
        return f"{self.styled}{fill}"


__all__ = [
    "ANSI_ESCAPE_RE",
    "Cell",
    "char_display_width",
    "colorize",
    "display_width",
    "strip_ansi",
]
