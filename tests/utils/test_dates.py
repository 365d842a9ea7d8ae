"""Tests for the calendar-day helpers."""

from __future__ import annotations

from datetime import date, datetime, timezone

from pomotask.utils.dates import (
    calendar_day,
    end_of_day,
    local_midnight,
    system_clock,
    week_start_offset,
)


def test_calendar_day_of_naive_datetime_is_its_date():
    assert calendar_day(datetime(2026, 1, 20, 23, 59)) == date(2026, 1, 20)


def test_calendar_day_passes_dates_through():
    assert calendar_day(date(2026, 1, 20)) == date(2026, 1, 20)


def test_calendar_day_converts_aware_values_to_local():
    value = datetime(2026, 1, 20, 12, 0, tzinfo=timezone.utc)
    assert calendar_day(value) == value.astimezone().date()


def test_local_midnight_and_end_of_day_bound_the_day():
    start = local_midnight(date(2026, 1, 20))
    end = end_of_day(date(2026, 1, 20))
    assert start.tzinfo is not None
    assert start.date() == end.date() == date(2026, 1, 20)
    assert start < end


def test_week_start_offset():
    tuesday = date(2026, 1, 20)
    sunday = date(2026, 1, 25)
    assert week_start_offset(tuesday, "mon") == 1
    assert week_start_offset(tuesday, "sun") == 2
    assert week_start_offset(sunday, "mon") == 6
    assert week_start_offset(sunday, "sun") == 0


def test_system_clock_is_aware_with_millisecond_precision():
    now = system_clock()
    assert now.tzinfo is not None
    assert now.microsecond % 1000 == 0
