"""Task executability rules.

A task's action is available when, in precedence order:

1. it is not completed;
2. it has no schedule, or
3. its scheduled day is in the past, or
4. its scheduled day is today and it either has no time of day or that time
   has been reached.

A task scheduled for a later day is ``scheduled``; one scheduled later today
at a specific time is ``time-locked``. Every function here is pure: ``now`` is
passed in, never read from a global clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from pomotask.models.task import Task
from pomotask.utils.dates import calendar_day, to_local

ExecutionStatusName = Literal["executable", "scheduled", "time-locked", "completed"]

REASON_COMPLETED = "既に完了済み"
REASON_IMMEDIATE = "すぐに実行可能"
REASON_EXECUTABLE = "実行可能"
REASON_SOON = "もうすぐ実行可能"


@dataclass(frozen=True)
class ExecutionStatus:
    executable: bool
    status: ExecutionStatusName
    reason: str


@dataclass
class TaskGroups:
    executable: list[Task] = field(default_factory=list)
    locked: list[Task] = field(default_factory=list)
    completed: list[Task] = field(default_factory=list)


def format_month_day(value: datetime) -> str:
    """``M/D`` without zero padding, in local time."""
    local = to_local(value)
    return f"{local.month}/{local.day}"


def format_hour_minute(value: datetime) -> str:
    """``HH:MM`` 24-hour, zero padded, in local time."""
    local = to_local(value)
    return f"{local.hour:02d}:{local.minute:02d}"


def format_schedule_chip(scheduled_at: datetime, has_time: bool) -> str:
    """Short schedule label: ``1/25`` or ``1/25 09:05``."""
    if has_time:
        return f"{format_month_day(scheduled_at)} {format_hour_minute(scheduled_at)}"
    return format_month_day(scheduled_at)


def evaluate(task: Task, now: datetime) -> ExecutionStatus:
    """Decide whether *task* may be executed at *now*."""
    if task.is_completed:
        return ExecutionStatus(False, "completed", REASON_COMPLETED)

    if task.scheduled_at is None:
        return ExecutionStatus(True, "executable", REASON_IMMEDIATE)

    scheduled_day = calendar_day(task.scheduled_at)
    today = calendar_day(now)

    if scheduled_day > today:
        return ExecutionStatus(
            False, "scheduled", f"{format_month_day(task.scheduled_at)}に実行予定"
        )

    if scheduled_day == today and task.has_time and to_local(task.scheduled_at) > to_local(now):
        return ExecutionStatus(
            False, "time-locked", f"{format_hour_minute(task.scheduled_at)}に実行予定"
        )

    # Today without a time, today with the time reached, or any past day
    return ExecutionStatus(True, "executable", REASON_EXECUTABLE)


def is_enabled(task: Task, now: datetime) -> bool:
    """Whether the task's action button should be enabled."""
    return evaluate(task, now).executable


def group_by_status(tasks: Iterable[Task], now: datetime) -> TaskGroups:
    """Split tasks into executable, locked (scheduled or time-locked) and completed."""
    groups = TaskGroups()
    for task in tasks:
        status = evaluate(task, now).status
        if status == "completed":
            groups.completed.append(task)
        elif status == "executable":
            groups.executable.append(task)
        else:
            groups.locked.append(task)
    return groups


def time_until_executable(task: Task, now: datetime) -> int | None:
    """Milliseconds until a timed task unlocks, 0 if already reached.

    Returns None for tasks without a time of day.
    """
    if task.scheduled_at is None or not task.has_time:
        return None

    delta = to_local(task.scheduled_at) - to_local(now)
    return max(0, int(delta.total_seconds() * 1000))


def format_time_until_executable(task: Task, now: datetime) -> str | None:
    """Human-readable countdown, e.g. ``2時間5分後に実行可能``."""
    time_ms = time_until_executable(task, now)
    if time_ms is None:
        return None
    if time_ms == 0:
        return REASON_IMMEDIATE

    total_seconds = time_ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60

    if hours > 0:
        return f"{hours}時間{minutes}分後に実行可能"
    if minutes > 0:
        return f"{minutes}分後に実行可能"
    return REASON_SOON
