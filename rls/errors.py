"""Exceptions raised while collecting a directory listing."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for failures that abort a listing."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class DirectoryReadError(ListingError):
    """The listed directory could not be opened or enumerated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"cannot read directory {str(path)!r}: {reason}")


class EntryReadError(ListingError):
    """Type or metadata of one directory child could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"cannot read metadata for {path.name!r}: {reason}")


__all__ = [
    "DirectoryReadError",
    "EntryReadError",
    "ListingError",
]
