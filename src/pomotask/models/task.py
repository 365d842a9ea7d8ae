"""Task data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

Priority = Literal["low", "medium", "high"]


class Task(BaseModel):
    """A to-do item whose action may be gated by its schedule."""

    id: str
    title: str
    description: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    has_time: bool = False
    priority: Optional[Priority] = None
    is_completed: bool = False
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _timed_task_needs_schedule(self) -> "Task":
        if self.has_time and self.scheduled_at is None:
            raise ValueError("has_time requires scheduled_at")
        return self


class TaskUpdate(BaseModel):
    """Partial update for a task; unset fields are left untouched."""

    model_config = {"extra": "forbid"}

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    has_time: Optional[bool] = None
    priority: Optional[Priority] = None
    is_completed: Optional[bool] = None
