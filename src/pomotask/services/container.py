"""Explicit wiring of the services used by one run of the application."""

from __future__ import annotations

from dataclasses import dataclass

from pomotask.models.config_models import AppConfig
from pomotask.models.focus.state import PomodoroTimer
from pomotask.models.focus.ticker import TickSource
from pomotask.repositories import KeyValueStore
from pomotask.services.focus_log_service import FocusLogService
from pomotask.services.pomodoro_service import PomodoroService
from pomotask.services.post_service import PostService
from pomotask.services.settings_service import SettingsService
from pomotask.services.task_service import TaskService
from pomotask.utils.dates import Clock, system_clock


@dataclass
class Services:
    config: AppConfig
    tasks: TaskService
    focus_logs: FocusLogService
    settings: SettingsService
    posts: PostService
    clock: Clock = system_clock

    def create_pomodoro(
        self,
        tick_source: TickSource,
        *,
        focus_duration: int | None = None,
        break_duration: int | None = None,
    ) -> PomodoroService:
        """Build a timer from the configuration, with optional duration overrides."""
        pomodoro_config = self.config.pomodoro
        timer = PomodoroTimer(
            tick_source,
            focus_duration=focus_duration or pomodoro_config.focus_duration,
            break_duration=break_duration or pomodoro_config.break_duration,
            resume_policy=pomodoro_config.resume_policy,
            clock=self.clock,
        )
        return PomodoroService(timer, self.focus_logs)


def build_services(
    config: AppConfig, store: KeyValueStore, clock: Clock = system_clock
) -> Services:
    """Construct every service once, sharing one store and one clock."""
    return Services(
        config=config,
        tasks=TaskService(store, clock),
        focus_logs=FocusLogService(store, clock),
        settings=SettingsService(store),
        posts=PostService(store, clock),
        clock=clock,
    )
