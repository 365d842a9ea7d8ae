"""Unit tests for pomotask.models.focus.analytics."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pomotask.models.focus.analytics import (
    calculate_daily_stats,
    calculate_weekly_stats,
    get_week_end,
    get_week_start,
)
from pomotask.models.focus.history import FocusLog


def _log(completed_at: datetime, minutes: int = 25, log_id: str = "log") -> FocusLog:
    return FocusLog(
        id=log_id,
        duration_minutes=minutes,
        completed_at=completed_at,
        created_at=completed_at,
    )


# ---------------------------------------------------------------------------
# Week boundaries
# ---------------------------------------------------------------------------


class TestWeekBoundaries:
    def test_monday_start_from_tuesday(self):
        start = get_week_start(datetime(2026, 1, 20, 15, 30))
        assert start.date() == date(2026, 1, 19)
        assert (start.hour, start.minute, start.second) == (0, 0, 0)

    def test_monday_start_from_sunday(self):
        assert get_week_start(date(2026, 1, 25)).date() == date(2026, 1, 19)

    def test_sunday_start(self):
        assert get_week_start(date(2026, 1, 20), "sun").date() == date(2026, 1, 18)
        assert get_week_start(date(2026, 1, 18), "sun").date() == date(2026, 1, 18)

    def test_week_end(self):
        end = get_week_end(date(2026, 1, 20))
        assert end.date() == date(2026, 1, 25)
        assert (end.hour, end.minute, end.second) == (23, 59, 59)
        assert end.microsecond == 999000


# ---------------------------------------------------------------------------
# Weekly stats
# ---------------------------------------------------------------------------


class TestWeeklyStats:
    def test_example_week(self):
        logs = [
            _log(datetime(2026, 1, 19, 9, 0), 25, "a"),
            _log(datetime(2026, 1, 19, 14, 0), 25, "b"),
            _log(datetime(2026, 1, 20, 10, 0), 50, "c"),
        ]
        stats = calculate_weekly_stats(logs, "mon", datetime(2026, 1, 21, 12, 0))
        assert stats.total_focus_minutes == 100
        assert stats.pomodoro_count == 3
        assert stats.daily_breakdown == [2, 1, 0, 0, 0, 0, 0]

    def test_breakdown_counts_logs_not_minutes(self):
        logs = [_log(datetime(2026, 1, 22, 9, 0), 90)]
        stats = calculate_weekly_stats(logs, "mon", date(2026, 1, 22))
        assert stats.daily_breakdown[3] == 1
        assert stats.total_focus_minutes == 90

    def test_excludes_logs_outside_the_week(self):
        logs = [
            _log(datetime(2026, 1, 19, 9, 0), 25, "in"),
            _log(datetime(2026, 1, 26, 9, 0), 25, "next-week"),
            _log(datetime(2026, 1, 18, 23, 59), 25, "last-week"),
        ]
        stats = calculate_weekly_stats(logs, "mon", date(2026, 1, 20))
        assert stats.pomodoro_count == 1
        assert stats.total_focus_minutes == 25

    def test_boundaries_are_inclusive(self):
        logs = [
            _log(datetime(2026, 1, 19, 0, 0), 25, "first"),
            _log(datetime(2026, 1, 25, 23, 59, 59), 25, "last"),
        ]
        stats = calculate_weekly_stats(logs, "mon", date(2026, 1, 20))
        assert stats.pomodoro_count == 2
        assert stats.daily_breakdown == [1, 0, 0, 0, 0, 0, 1]

    def test_sunday_start_indexes_sunday_first(self):
        logs = [
            _log(datetime(2026, 1, 18, 9, 0), 25, "sun"),
            _log(datetime(2026, 1, 24, 9, 0), 25, "sat"),
        ]
        stats = calculate_weekly_stats(logs, "sun", date(2026, 1, 20))
        assert stats.daily_breakdown == [1, 0, 0, 0, 0, 0, 1]

    def test_empty(self):
        stats = calculate_weekly_stats([], "mon", date(2026, 1, 20))
        assert stats.total_focus_minutes == 0
        assert stats.pomodoro_count == 0
        assert stats.daily_breakdown == [0] * 7
        assert stats.start_date.date() == date(2026, 1, 19)
        assert stats.end_date.date() == date(2026, 1, 25)

    def test_invariants_hold(self):
        logs = [_log(datetime(2026, 1, 19 + i % 7, 8, 0), 10 + i, f"l{i}") for i in range(12)]
        stats = calculate_weekly_stats(logs, "mon", date(2026, 1, 21))
        assert len(stats.daily_breakdown) == 7
        assert sum(stats.daily_breakdown) == stats.pomodoro_count
        assert stats.total_focus_minutes >= stats.pomodoro_count


# ---------------------------------------------------------------------------
# Daily stats
# ---------------------------------------------------------------------------


class TestDailyStats:
    def test_counts_logs_of_the_day(self):
        logs = [
            _log(datetime(2026, 1, 20, 9, 0), 25, "a"),
            _log(datetime(2026, 1, 20, 17, 0), 30, "b"),
            _log(datetime(2026, 1, 21, 9, 0), 25, "c"),
        ]
        stats = calculate_daily_stats(logs, date(2026, 1, 20))
        assert stats.date == date(2026, 1, 20)
        assert stats.focus_minutes == 55
        assert stats.pomodoro_count == 2

    def test_accepts_datetime_target(self):
        logs = [_log(datetime(2026, 1, 20, 9, 0))]
        stats = calculate_daily_stats(logs, datetime(2026, 1, 20, 23, 0))
        assert stats.date == date(2026, 1, 20)
        assert stats.pomodoro_count == 1

    @pytest.mark.parametrize("day", [date(2026, 1, 19), date(2026, 2, 20)])
    def test_no_match(self, day):
        logs = [_log(datetime(2026, 1, 20, 9, 0))]
        assert calculate_daily_stats(logs, day).pomodoro_count == 0
