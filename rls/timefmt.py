"""Relative modification-time labels and recency buckets."""

from __future__ import annotations

import time
from enum import IntEnum

NS_PER_SECOND = 1_000_000_000
JUST_NOW_SECONDS = 5

SECOND = 1
MINUTE = 60
HOUR = 3_600
DAY = 86_400
WEEK = 604_800
# Average Gregorian month and Julian year.
MONTH = 2_629_746
YEAR = 31_557_600


class Recency(IntEnum):
    """Coarse age category of a timestamp, ordered from newest to oldest.

    ``FUTURE`` and ``UNKNOWN`` sit outside the age scale; they only select a
    presentation color.
    """

    JUST_NOW = 0
    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAYS = 4
    WEEKS = 5
    MONTHS = 6
    YEARS = 7
    FUTURE = 8
    UNKNOWN = 9


# (exclusive upper bound in seconds, bucket, unit name, unit length in seconds)
_BUCKETS: tuple[tuple[int | None, Recency, str, int], ...] = (
    (MINUTE, Recency.SECONDS, "second", SECOND),
    (HOUR, Recency.MINUTES, "minute", MINUTE),
    (DAY, Recency.HOURS, "hour", HOUR),
    (WEEK, Recency.DAYS, "day", DAY),
    (MONTH, Recency.WEEKS, "week", WEEK),
    (YEAR, Recency.MONTHS, "month", MONTH),
    (None, Recency.YEARS, "year", YEAR),
)


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _bucket_for(seconds: int) -> tuple[Recency, str]:
    """Return bucket and ``"{N} {unit}(s)"`` text for a non-negative age."""
    for upper, recency, unit, unit_seconds in _BUCKETS:
        if upper is None or seconds < upper:
            return recency, _pluralize(seconds // unit_seconds, unit)
    raise AssertionError("unreachable: last bucket is unbounded")


def relative_time(mtime_ns: int | None, now_ns: int | None = None) -> tuple[str, Recency]:
    """Return a human label and recency bucket for ``mtime_ns``.

    Elapsed time is truncated to whole seconds and then to whole units; each
    bucket's upper bound is exclusive. Instants after ``now_ns`` are labeled
    ``"in N units"``.
    """
    if mtime_ns is None:
        return "unknown", Recency.UNKNOWN
    if now_ns is None:
        now_ns = time.time_ns()

    delta_ns = now_ns - mtime_ns
    if delta_ns < 0:
        # Sub-second offsets round up so the label never reads "in 0 seconds".
        _recency, amount = _bucket_for(max(1, -delta_ns // NS_PER_SECOND))
        return f"in {amount}", Recency.FUTURE

    seconds = delta_ns // NS_PER_SECOND
    if seconds < JUST_NOW_SECONDS:
        return "just now", Recency.JUST_NOW
    recency, amount = _bucket_for(seconds)
    return f"{amount} ago", recency


__all__ = [
    "NS_PER_SECOND",
    "Recency",
    "relative_time",
]
