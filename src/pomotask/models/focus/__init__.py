"""Focus timer, focus history and statistics models."""

from .analytics import DailyStats, WeeklyStats, calculate_daily_stats, calculate_weekly_stats
from .history import FocusLog
from .state import (
    PhaseCompleted,
    PomodoroSession,
    PomodoroState,
    PomodoroTimer,
    ResumePolicy,
    SessionSnapshot,
)
from .ticker import AsyncioTickSource, ManualTickSource, TickSource

__all__ = [
    "AsyncioTickSource",
    "DailyStats",
    "FocusLog",
    "ManualTickSource",
    "PhaseCompleted",
    "PomodoroSession",
    "PomodoroState",
    "PomodoroTimer",
    "ResumePolicy",
    "SessionSnapshot",
    "TickSource",
    "WeeklyStats",
    "calculate_daily_stats",
    "calculate_weekly_stats",
]
