"""Unit tests for pomotask.services.focus_log_service."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pomotask.adapters import MemoryStore
from pomotask.exceptions import StorageError, ValidationError
from pomotask.repositories import FOCUS_LOGS_KEY
from pomotask.services.focus_log_service import FocusLogService


class FailingStore(MemoryStore):
    def save(self, key: str, data: bytes) -> None:
        raise StorageError("read-only", key=key)


@pytest.fixture()
def service(store, clock) -> FocusLogService:
    return FocusLogService(store, clock)


class TestAddLog:
    def test_defaults_completed_at_to_now(self, service, clock):
        log = service.add_log(25)
        assert log.completed_at == clock()
        assert log.created_at == clock()
        assert log.visibility == "public"
        assert log.id.startswith("log_")

    def test_optional_fields(self, service):
        log = service.add_log(
            50,
            completed_at=datetime(2026, 1, 19, 9, 0),
            task_id="task_1",
            message="deep work",
            visibility="private",
        )
        assert log.task_id == "task_1"
        assert log.message == "deep work"
        assert log.visibility == "private"

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_rejects_non_positive_minutes(self, service, minutes):
        with pytest.raises(ValidationError):
            service.add_log(minutes)
        assert service.logs == []

    def test_persists(self, service, store, clock):
        log = service.add_log(25)
        assert FocusLogService(store, clock).logs == [log]

    def test_failed_save_keeps_log_in_memory(self, clock):
        service = FocusLogService(FailingStore(), clock)
        with pytest.raises(StorageError):
            service.add_log(25)
        assert len(service.logs) == 1


class TestWeekQueries:
    @pytest.fixture()
    def seeded(self, service):
        service.add_log(25, completed_at=datetime(2026, 1, 18, 23, 0))
        service.add_log(25, completed_at=datetime(2026, 1, 19, 0, 0))
        service.add_log(30, completed_at=datetime(2026, 1, 25, 23, 59))
        service.add_log(45, completed_at=datetime(2026, 1, 26, 0, 0))
        return service

    def test_logs_for_week_cover_seven_days(self, seeded):
        logs = seeded.get_logs_for_week(date(2026, 1, 19))
        assert [log.duration_minutes for log in logs] == [25, 30]

    def test_total_minutes_for_week(self, seeded):
        assert seeded.get_total_focus_minutes_for_week(datetime(2026, 1, 19, 12, 0)) == 55

    def test_weekly_stats_defaults_to_clock(self, seeded):
        stats = seeded.weekly_stats()
        assert stats.pomodoro_count == 2
        assert stats.daily_breakdown == [1, 0, 0, 0, 0, 0, 1]

    def test_weekly_stats_sunday_start(self, seeded):
        stats = seeded.weekly_stats("sun")
        # Sunday 1/18 through Saturday 1/24
        assert stats.pomodoro_count == 2
        assert stats.daily_breakdown[0] == 1
        assert stats.daily_breakdown[1] == 1

    def test_daily_stats(self, service):
        service.add_log(25, completed_at=datetime(2026, 1, 20, 8, 0))
        service.add_log(25, completed_at=datetime(2026, 1, 20, 9, 0))
        stats = service.daily_stats()
        assert stats.pomodoro_count == 2
        assert stats.focus_minutes == 50


def test_delete_logs(service, store):
    service.add_log(25)
    service.delete_logs()
    assert service.logs == []
    assert FOCUS_LOGS_KEY not in store.data
