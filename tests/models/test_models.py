"""Validation tests for the pydantic models."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from pomotask.models import AppConfig, FocusLog, Settings, SNSPost, Task, TaskUpdate

NOW = datetime(2026, 1, 20, 10, 0)


def test_task_with_time_needs_schedule():
    with pytest.raises(ValidationError):
        Task(id="t", title="x", has_time=True, created_at=NOW, updated_at=NOW)


def test_task_priority_is_restricted():
    with pytest.raises(ValidationError):
        Task(id="t", title="x", priority="urgent", created_at=NOW, updated_at=NOW)


def test_task_update_only_reports_set_fields():
    assert TaskUpdate(title="New").model_dump(exclude_unset=True) == {"title": "New"}


def test_focus_log_minutes_must_be_positive():
    with pytest.raises(ValidationError):
        FocusLog(id="l", duration_minutes=0, completed_at=NOW, created_at=NOW)


def test_post_minutes_may_be_zero():
    post = SNSPost(
        id="p", user_id="u", user_name="n", user_icon="i", message="m",
        focus_minutes=0, created_at=NOW,
    )
    assert post.is_own


def test_settings_reject_unknown_week_start():
    with pytest.raises(ValidationError):
        Settings(week_start="wed")


def test_app_config_rejects_zero_duration():
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"pomodoro": {"focus_duration": 0}})
