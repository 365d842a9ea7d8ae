"""Task service - business logic for the task list.

Holds the in-memory task collection for the current run and persists every
mutation as a whole-collection replacement. If a save fails the in-memory
collection keeps the change, the error is logged and re-raised to the caller.
"""

from __future__ import annotations

import secrets
import string
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pomotask.exceptions import StorageError, TaskNotFoundError, ValidationError
from pomotask.models.task import Priority, Task, TaskUpdate
from pomotask.repositories import TASKS_KEY, KeyValueStore, StoredDocument
from pomotask.utils.dates import Clock, calendar_day, system_clock, to_local
from pomotask.utils.logger import get_logger
from pomotask.utils.task_execution import (
    ExecutionStatus,
    TaskGroups,
    evaluate,
    format_time_until_executable,
    group_by_status,
)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_task_id(now: datetime) -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"task_{int(now.timestamp() * 1000)}_{suffix}"


class TaskService:
    """Service for task business logic."""

    def __init__(self, store: KeyValueStore, clock: Clock = system_clock):
        """Initialize the task service.

        Args:
            store: Persistence gateway holding the task collection
            clock: Source of the current time
        """
        self._document: StoredDocument[list[Task]] = StoredDocument(store, TASKS_KEY, list[Task])
        self._clock = clock
        self._tasks: list[Task] | None = None
        self.logger = get_logger(__name__)

    @property
    def tasks(self) -> list[Task]:
        """Current tasks, loaded from storage on first access."""
        if self._tasks is None:
            self._tasks = self._document.load(default=[])
            self.logger.debug("loaded %d tasks", len(self._tasks))
        return list(self._tasks)

    def _commit(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        try:
            self._document.save(tasks)
        except StorageError:
            self.logger.error("failed to persist %d tasks", len(tasks))
            raise

    def get_task(self, task_id: str) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def add_task(
        self,
        title: str,
        scheduled_at: datetime | None = None,
        has_time: bool = False,
        *,
        priority: Priority | None = None,
        description: str | None = None,
    ) -> Task:
        """Create a new task.

        Args:
            title: Display title, must not be blank
            scheduled_at: Optional schedule; None means always executable
            has_time: Whether the time of day of *scheduled_at* matters
            priority: low, medium or high
            description: Free-form notes

        Raises:
            ValidationError: If the title is blank or a time is set without a schedule
        """
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty")
        if has_time and scheduled_at is None:
            raise ValidationError("A task with a time of day needs a scheduled date")

        now = self._clock()
        try:
            task = Task(
                id=generate_task_id(now),
                title=title.strip(),
                description=description,
                scheduled_at=scheduled_at,
                has_time=has_time,
                priority=priority,
                is_completed=False,
                created_at=now,
                updated_at=now,
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid task: {e}") from e
        self._commit([*self.tasks, task])
        self.logger.info("task added: %s", task.id)
        return task

    def update_task(self, task_id: str, **updates: Any) -> Task:
        """Apply a partial update and refresh ``updated_at``.

        Raises:
            TaskNotFoundError: If no task has *task_id*
            ValidationError: If the update is invalid
        """
        try:
            changes = TaskUpdate(**updates).model_dump(exclude_unset=True)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid task update: {e}") from e

        if "title" in changes and not (changes["title"] or "").strip():
            raise ValidationError("Task title cannot be empty")

        current = self.get_task(task_id)
        try:
            updated = Task.model_validate(
                {**current.model_dump(), **changes, "updated_at": self._clock()}
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid task update: {e}") from e

        self._commit([updated if t.id == task_id else t for t in self.tasks])
        self.logger.info("task updated: %s (%s)", task_id, ", ".join(sorted(changes)))
        return updated

    def toggle_task_completion(self, task_id: str) -> Task:
        current = self.get_task(task_id)
        return self.update_task(task_id, is_completed=not current.is_completed)

    def delete_task(self, task_id: str) -> None:
        self.get_task(task_id)
        self._commit([t for t in self.tasks if t.id != task_id])
        self.logger.info("task deleted: %s", task_id)

    # ----- Queries -----

    def evaluate(self, task: Task) -> ExecutionStatus:
        return evaluate(task, self._clock())

    def group_by_status(self) -> TaskGroups:
        return group_by_status(self.tasks, self._clock())

    def countdown(self, task: Task) -> str | None:
        """Time left until a timed task unlocks, as display text."""
        return format_time_until_executable(task, self._clock())

    def get_tasks_for_date(self, day: date | datetime) -> list[Task]:
        """Tasks scheduled on the calendar day of *day*."""
        target = calendar_day(day)
        return [
            t for t in self.tasks
            if t.scheduled_at is not None and calendar_day(t.scheduled_at) == target
        ]

    def get_todays_tasks(self) -> list[Task]:
        """Tasks scheduled today whose time, if any, has been reached."""
        now = self._clock()
        todays = []
        for task in self.get_tasks_for_date(now):
            if task.has_time and to_local(task.scheduled_at) > to_local(now):
                continue
            todays.append(task)
        return todays

    def get_completion_rate(self) -> int:
        """Percent of today's tasks that are completed, rounded; 0 when there are none."""
        todays = self.get_todays_tasks()
        if not todays:
            return 0
        completed = sum(1 for t in todays if t.is_completed)
        # round half up
        return int(completed * 100 / len(todays) + 0.5)
