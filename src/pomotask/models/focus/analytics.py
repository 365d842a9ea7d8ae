"""Weekly and daily statistics over completed focus logs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from pomotask.models.focus.history import FocusLog
from pomotask.utils.dates import (
    WeekStartDay,
    calendar_day,
    end_of_day,
    local_midnight,
    system_clock,
    to_local,
    week_start_offset,
)

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class WeeklyStats:
    """Focus totals for one week window."""

    total_focus_minutes: int
    pomodoro_count: int
    daily_breakdown: list[int] = field(default_factory=lambda: [0] * DAYS_PER_WEEK)
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class DailyStats:
    date: date
    focus_minutes: int
    pomodoro_count: int


def get_week_start(reference: datetime | date, week_start_day: WeekStartDay = "mon") -> datetime:
    """Local midnight of the most recent *week_start_day* on or before *reference*."""
    day = calendar_day(reference)
    first = day - timedelta(days=week_start_offset(day, week_start_day))
    return local_midnight(first)


def get_week_end(reference: datetime | date, week_start_day: WeekStartDay = "mon") -> datetime:
    """23:59:59.999 local on the sixth day after the week start."""
    start = get_week_start(reference, week_start_day)
    return end_of_day(start.date() + timedelta(days=DAYS_PER_WEEK - 1))


def calculate_weekly_stats(
    logs: Iterable[FocusLog],
    week_start_day: WeekStartDay = "mon",
    reference_date: datetime | date | None = None,
) -> WeeklyStats:
    """Aggregate the logs that fall inside the week containing *reference_date*.

    ``daily_breakdown`` counts logs (not minutes) per day; index 0 is the
    configured first day of the week.
    """
    if reference_date is None:
        reference_date = system_clock()

    start = get_week_start(reference_date, week_start_day)
    end = get_week_end(reference_date, week_start_day)

    week_logs = [log for log in logs if start <= to_local(log.completed_at) <= end]

    daily_breakdown = [0] * DAYS_PER_WEEK
    for log in week_logs:
        daily_breakdown[week_start_offset(calendar_day(log.completed_at), week_start_day)] += 1

    return WeeklyStats(
        total_focus_minutes=sum(log.duration_minutes for log in week_logs),
        pomodoro_count=len(week_logs),
        daily_breakdown=daily_breakdown,
        start_date=start,
        end_date=end,
    )


def calculate_daily_stats(logs: Iterable[FocusLog], target: datetime | date) -> DailyStats:
    """Aggregate the logs whose ISO date portion equals that of *target*.

    This is a plain string match on the stored timestamps, independent of week
    boundaries and of the local timezone.
    """
    date_str = target.isoformat()[:10]
    day_logs = [log for log in logs if log.completed_at.isoformat()[:10] == date_str]

    return DailyStats(
        date=target if not isinstance(target, datetime) else target.date(),
        focus_minutes=sum(log.duration_minutes for log in day_logs),
        pomodoro_count=len(day_logs),
    )
