"""Configuration and user settings models.

``AppConfig`` is the tool configuration stored in ``config.json`` under the
platform config directory. ``Settings`` holds the user-facing preferences that
the application persists alongside its other collections.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from pomotask.models.focus.state import (
    DEFAULT_BREAK_DURATION,
    DEFAULT_FOCUS_DURATION,
    ResumePolicy,
)

Theme = Literal["light", "dark", "system"]
FontSize = Literal["s", "m", "l"]
WeekStart = Literal["mon", "sun"]


class PomodoroConfig(BaseModel):
    """Timer configuration, durations in seconds."""

    focus_duration: int = Field(default=DEFAULT_FOCUS_DURATION, gt=0)
    break_duration: int = Field(default=DEFAULT_BREAK_DURATION, gt=0)
    resume_policy: ResumePolicy = Field(default=ResumePolicy.FOCUS)


class StorageConfig(BaseModel):
    """Where the key-value store keeps its files."""

    data_dir: str | None = Field(
        default=None, description="Override for the platform data directory"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main pomotask configuration."""

    pomodoro: PomodoroConfig = Field(default_factory=PomodoroConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class Settings(BaseModel):
    """User preferences persisted under the settings key."""

    theme: Theme = "system"
    font_size: FontSize = "m"
    week_start: WeekStart = "mon"
    reminder_enabled: bool = False
