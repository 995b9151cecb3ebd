"""Tests for relative modification-time labels and recency buckets."""

from __future__ import annotations

import unittest

from rls.timefmt import NS_PER_SECOND, Recency, relative_time

NOW_NS = 1_700_000_000 * NS_PER_SECOND


def _ago(seconds: int) -> tuple[str, Recency]:
    return relative_time(NOW_NS - seconds * NS_PER_SECOND, NOW_NS)


class RelativeTimeTests(unittest.TestCase):
    def test_missing_timestamp_is_unknown(self) -> None:
        self.assertEqual(relative_time(None, NOW_NS), ("unknown", Recency.UNKNOWN))

    def test_first_seconds_are_just_now(self) -> None:
        self.assertEqual(_ago(0), ("just now", Recency.JUST_NOW))
        self.assertEqual(_ago(4), ("just now", Recency.JUST_NOW))
        self.assertEqual(_ago(5), ("5 seconds ago", Recency.SECONDS))

    def test_sub_second_elapsed_time_is_truncated(self) -> None:
        label, recency = relative_time(NOW_NS - (5 * NS_PER_SECOND - 1), NOW_NS)
        self.assertEqual((label, recency), ("just now", Recency.JUST_NOW))

    def test_thresholds_select_bucket_and_unit(self) -> None:
        cases = [
            (59, "59 seconds ago", Recency.SECONDS),
            (60, "1 minute ago", Recency.MINUTES),
            (119, "1 minute ago", Recency.MINUTES),
            (120, "2 minutes ago", Recency.MINUTES),
            (3_599, "59 minutes ago", Recency.MINUTES),
            (3_600, "1 hour ago", Recency.HOURS),
            (86_399, "23 hours ago", Recency.HOURS),
            (86_400, "1 day ago", Recency.DAYS),
            (604_799, "6 days ago", Recency.DAYS),
            (604_800, "1 week ago", Recency.WEEKS),
            (2_629_745, "4 weeks ago", Recency.WEEKS),
            (2_629_746, "1 month ago", Recency.MONTHS),
            (31_556_951, "11 months ago", Recency.MONTHS),
            (31_557_600, "1 year ago", Recency.YEARS),
            (3 * 31_557_600, "3 years ago", Recency.YEARS),
        ]
        for seconds, label, recency in cases:
            with self.subTest(seconds=seconds):
                self.assertEqual(_ago(seconds), (label, recency))

    def test_past_buckets_are_monotonic(self) -> None:
        previous = Recency.JUST_NOW
        seconds = 0
        while seconds < 5 * 31_557_600:
            label, recency = _ago(seconds)
            self.assertGreaterEqual(recency, previous)
            self.assertLessEqual(recency, Recency.YEARS)
            if seconds >= 5:
                self.assertTrue(label.endswith(" ago"), label)
            previous = recency
            seconds = seconds * 2 + 1

    def test_future_timestamps_use_in_prefix(self) -> None:
        self.assertEqual(relative_time(NOW_NS + 3 * NS_PER_SECOND, NOW_NS), ("in 3 seconds", Recency.FUTURE))
        self.assertEqual(relative_time(NOW_NS + 90 * NS_PER_SECOND, NOW_NS), ("in 1 minute", Recency.FUTURE))
        self.assertEqual(relative_time(NOW_NS + 2 * 86_400 * NS_PER_SECOND, NOW_NS), ("in 2 days", Recency.FUTURE))

    def test_sub_second_future_offset_counts_as_one_second(self) -> None:
        self.assertEqual(relative_time(NOW_NS + NS_PER_SECOND // 2, NOW_NS), ("in 1 second", Recency.FUTURE))
        self.assertEqual(relative_time(NOW_NS + 1, NOW_NS), ("in 1 second", Recency.FUTURE))

    def test_single_unit_is_not_pluralized(self) -> None:
        self.assertEqual(_ago(7_200)[0], "2 hours ago")
        self.assertEqual(_ago(3_600)[0], "1 hour ago")


if __name__ == "__main__":
    unittest.main()
