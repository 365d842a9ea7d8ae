"""Clock source and calendar-day helpers shared by the evaluator and statistics.

All day-level comparisons go through :func:`calendar_day`, which converts a
timestamp to local time and drops the time of day. Naive datetimes are read as
local wall-clock time, aware ones are converted, so naive and aware values can
be compared safely.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time
from typing import Literal

Clock = Callable[[], datetime]
WeekStartDay = Literal["mon", "sun"]


def system_clock() -> datetime:
    """Current local time, timezone-aware, millisecond precision."""
    now = datetime.now().astimezone()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def to_local(value: datetime) -> datetime:
    """Return *value* as an aware datetime in the local timezone."""
    return value.astimezone()


def calendar_day(value: datetime | date) -> date:
    """Calendar day of *value* in local time."""
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def local_midnight(day: date) -> datetime:
    """Aware local datetime at 00:00 of *day*."""
    return datetime.combine(day, time.min).astimezone()


def week_start_offset(day: date, week_start_day: WeekStartDay) -> int:
    """Days between *day* and the first day of its week.

    Monday-start weeks map Mon..Sun to 0..6, Sunday-start weeks Sun..Sat.
    """
    if week_start_day == "sun":
        return (day.weekday() + 1) % 7
    return day.weekday()


def end_of_day(day: date) -> datetime:
    """Aware local datetime at 23:59:59.999 of *day*."""
    return datetime.combine(day, time(23, 59, 59, 999000)).astimezone()
