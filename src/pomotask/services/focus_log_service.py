"""Focus log service - records finished focus intervals and derives statistics."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta

from pomotask.exceptions import StorageError, ValidationError
from pomotask.models.focus.analytics import (
    DAYS_PER_WEEK,
    DailyStats,
    WeeklyStats,
    calculate_daily_stats,
    calculate_weekly_stats,
)
from pomotask.models.focus.history import FocusLog, Visibility
from pomotask.repositories import FOCUS_LOGS_KEY, KeyValueStore, StoredDocument
from pomotask.utils.dates import (
    Clock,
    WeekStartDay,
    calendar_day,
    end_of_day,
    local_midnight,
    system_clock,
    to_local,
)
from pomotask.utils.logger import get_logger


class FocusLogService:
    """Service owning the focus log collection."""

    def __init__(self, store: KeyValueStore, clock: Clock = system_clock):
        self._document: StoredDocument[list[FocusLog]] = StoredDocument(
            store, FOCUS_LOGS_KEY, list[FocusLog]
        )
        self._clock = clock
        self._logs: list[FocusLog] | None = None
        self.logger = get_logger(__name__)

    @property
    def logs(self) -> list[FocusLog]:
        if self._logs is None:
            self._logs = self._document.load(default=[])
        return list(self._logs)

    def add_log(
        self,
        duration_minutes: int,
        *,
        completed_at: datetime | None = None,
        task_id: str | None = None,
        message: str | None = None,
        visibility: Visibility = "public",
    ) -> FocusLog:
        """Append a finished focus interval.

        Raises:
            ValidationError: If *duration_minutes* is not positive
            StorageError: If the collection could not be saved; the log is
                still kept in memory
        """
        if duration_minutes <= 0:
            raise ValidationError("Focus duration must be a positive number of minutes")

        now = self._clock()
        log = FocusLog(
            id=f"log_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:6]}",
            task_id=task_id,
            duration_minutes=duration_minutes,
            completed_at=completed_at or now,
            message=message,
            visibility=visibility,
            created_at=now,
        )
        self._logs = [*self.logs, log]
        try:
            self._document.save(self._logs)
        except StorageError:
            self.logger.error("failed to persist focus log %s", log.id)
            raise
        self.logger.info("focus log added: %s (%d min)", log.id, duration_minutes)
        return log

    def get_logs_for_week(self, start_date: date | datetime) -> list[FocusLog]:
        """Logs completed from local midnight of *start_date* through the end of its sixth following day."""
        first = calendar_day(start_date)
        start = local_midnight(first)
        end = end_of_day(first + timedelta(days=DAYS_PER_WEEK - 1))
        return [log for log in self.logs if start <= to_local(log.completed_at) <= end]

    def get_total_focus_minutes_for_week(self, start_date: date | datetime) -> int:
        return sum(log.duration_minutes for log in self.get_logs_for_week(start_date))

    def weekly_stats(
        self, week_start_day: WeekStartDay = "mon", reference_date: datetime | None = None
    ) -> WeeklyStats:
        return calculate_weekly_stats(
            self.logs, week_start_day, reference_date or self._clock()
        )

    def daily_stats(self, target: date | datetime | None = None) -> DailyStats:
        return calculate_daily_stats(self.logs, target or self._clock())

    def delete_logs(self) -> None:
        """Forget every log, in memory and in storage."""
        self._logs = []
        self._document.remove()
        self.logger.info("focus logs cleared")
