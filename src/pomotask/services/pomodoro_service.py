"""Pomodoro service - connects the timer to the focus log.

Every FOCUS phase that runs to completion is recorded as a :class:`FocusLog`.
Recording happens inside the tick callback, so a storage failure is logged and
kept in ``last_error`` instead of propagating into the tick source.
"""

from __future__ import annotations

from pomotask.exceptions import StorageError
from pomotask.models.focus.history import FocusLog
from pomotask.models.focus.state import PhaseCompleted, PomodoroState, PomodoroTimer
from pomotask.services.focus_log_service import FocusLogService
from pomotask.utils.logger import get_logger


class PomodoroService:
    """Drives one timer and logs its completed focus phases."""

    def __init__(self, timer: PomodoroTimer, focus_logs: FocusLogService):
        self.timer = timer
        self.focus_logs = focus_logs
        self.task_id: str | None = None
        self.completed_focus_phases = 0
        self.recorded: list[FocusLog] = []
        self.last_error: StorageError | None = None
        self.logger = get_logger(__name__)
        self._unsubscribe = timer.subscribe_completion(self._on_phase_completed)

    def start_focus(self, task_id: str | None = None) -> None:
        """Start a focus phase, optionally attributing it to a task."""
        self.task_id = task_id
        self.timer.start_focus()
        self.logger.info("focus started (task=%s)", task_id or "-")

    def start_break(self) -> None:
        self.timer.start_break()
        self.logger.info("break started")

    def pause(self) -> None:
        self.timer.pause()

    def resume(self) -> None:
        self.timer.resume()

    def stop(self) -> None:
        self.timer.stop()
        self.logger.info("timer stopped")

    def reset(self) -> None:
        self.timer.reset()
        self.completed_focus_phases = 0

    def close(self) -> None:
        """Stop ticking and detach from the timer."""
        self.timer.stop()
        self._unsubscribe()

    def focus_minutes_for_post(self) -> int:
        """Whole minutes of focus accumulated by the session, rounded."""
        return (self.timer.session.total_focus_time + 30) // 60

    def _on_phase_completed(self, event: PhaseCompleted) -> None:
        self.logger.info("%s phase completed after %ds", event.phase.value, event.duration_seconds)
        if event.phase != PomodoroState.FOCUS:
            return

        self.completed_focus_phases += 1
        minutes = max(1, (event.duration_seconds + 30) // 60)
        try:
            log = self.focus_logs.add_log(
                minutes, completed_at=event.completed_at, task_id=self.task_id
            )
        except StorageError as e:
            self.last_error = e
            return
        self.recorded.append(log)
