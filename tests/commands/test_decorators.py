"""Tests for command_wrapper."""

from __future__ import annotations

import pytest
import typer

from pomotask.commands.decorators import AppError, command_wrapper
from pomotask.exceptions import StorageError


def test_returns_result_of_sync_command():
    @command_wrapper
    def cmd():
        return 42

    assert cmd() == 42


def test_runs_coroutine_commands():
    @command_wrapper
    async def cmd(value):
        return value * 2

    assert cmd(21) == 42


def test_app_error_exit_code(capsys):
    @command_wrapper
    def cmd():
        raise AppError("boom", exit_code=3)

    with pytest.raises(typer.Exit) as exc_info:
        cmd()
    assert exc_info.value.exit_code == 3
    assert "boom" in capsys.readouterr().out


def test_domain_error_exits_with_one():
    @command_wrapper
    def cmd():
        raise StorageError("disk full")

    with pytest.raises(typer.Exit) as exc_info:
        cmd()
    assert exc_info.value.exit_code == 1


def test_unexpected_error_is_reported(capsys):
    @command_wrapper
    def cmd():
        raise RuntimeError("kaput")

    with pytest.raises(typer.Exit):
        cmd()
    assert "An unexpected error occurred: kaput" in capsys.readouterr().out


def test_typer_exit_passes_through():
    @command_wrapper
    def cmd():
        raise typer.Exit(0)

    with pytest.raises(typer.Exit) as exc_info:
        cmd()
    assert exc_info.value.exit_code == 0


def test_preserves_metadata():
    @command_wrapper
    def my_command():
        """Docstring."""

    assert my_command.__name__ == "my_command"
    assert my_command.__doc__ == "Docstring."
