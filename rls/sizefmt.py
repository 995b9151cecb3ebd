"""Human-scaled byte counts."""

from __future__ import annotations

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")
SIZE_STEP = 1024


def format_size(num_bytes: int) -> str:
    """Format ``num_bytes`` using the largest binary unit not exceeding it.

    Scaled values below 10 keep one decimal (``"1.5 KB"``); larger values and
    plain byte counts are shown as integers (``"512 B"``, ``"12 MB"``).
    """
    if num_bytes < 0:
        raise ValueError(f"size must be non-negative: {num_bytes}")

    unit_index = 0
    scale = 1
    while unit_index + 1 < len(SIZE_UNITS) and num_bytes >= scale * SIZE_STEP:
        scale *= SIZE_STEP
        unit_index += 1

    unit = SIZE_UNITS[unit_index]
    if unit_index == 0:
        return f"{num_bytes} {unit}"
    value = num_bytes / scale
    if value < 10:
        return f"{value:.1f} {unit}"
    return f"{value:.0f} {unit}"


__all__ = ["SIZE_UNITS", "format_size"]
