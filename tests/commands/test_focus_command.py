"""CLI tests for the focus and stats sub-commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from pomotask.main import app

runner = CliRunner()


def test_focus_start_logs_completed_phase():
    result = runner.invoke(app, ["focus", "start", "--focus-seconds", "1", "--cycles", "1"])
    assert result.exit_code == 0, result.output
    assert "Completed 1 focus phase(s)" in result.output

    history = runner.invoke(app, ["focus", "history", "--output", "json"])
    [log] = json.loads(history.output)
    assert log["minutes"] == 1


def test_focus_start_with_post():
    result = runner.invoke(
        app, ["focus", "start", "--focus-seconds", "1", "--post", "Short sprint"]
    )
    assert result.exit_code == 0, result.output

    posts = runner.invoke(app, ["posts", "list", "--output", "json"])
    [post] = json.loads(posts.output)
    assert post["message"] == "Short sprint"


def test_focus_start_unknown_task():
    result = runner.invoke(app, ["focus", "start", "task_missing"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_stats_week_json():
    runner.invoke(app, ["focus", "start", "--focus-seconds", "1"])
    result = runner.invoke(app, ["stats", "week", "--output", "json"])
    assert result.exit_code == 0, result.output
    stats = json.loads(result.output)
    assert stats["pomodoro_count"] == 1
    assert stats["total_focus_minutes"] == 1
    assert sum(stats["daily_breakdown"]) == 1


def test_stats_week_pretty_with_sunday_start():
    result = runner.invoke(app, ["stats", "week", "--week-start", "sun"])
    assert result.exit_code == 0, result.output
    assert "日" in result.output


def test_stats_week_rejects_bad_week_start():
    result = runner.invoke(app, ["stats", "week", "--week-start", "wed"])
    assert result.exit_code != 0


def test_stats_day_for_a_date_without_logs():
    result = runner.invoke(app, ["stats", "day", "--date", "2026-01-19", "--output", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "date": "2026-01-19",
        "focus_minutes": 0,
        "pomodoro_count": 0,
    }


def test_focus_start_help_explains_how_to_stop():
    result = runner.invoke(app, ["focus", "start", "--help"])
    assert result.exit_code == 0
    assert "Ctrl-C" in result.output
