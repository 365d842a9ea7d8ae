"""User preference commands."""

from __future__ import annotations

import typer

from pomotask.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import get_services

app = typer.Typer(help="User preferences", no_args_is_help=True)


@app.command("show")
@command_wrapper
def show_settings(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the current preferences."""
    format_output(get_services().settings.settings.model_dump(), output)


@app.command("set")
@command_wrapper
def set_setting(
    key: str = typer.Argument(..., help="theme, font_size, week_start or reminder_enabled"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Change one preference."""
    parsed: str | bool = value
    if value.lower() in ("true", "false"):
        parsed = value.lower() == "true"

    get_services().settings.update(**{key: parsed})
    format_success(f"Setting '{key}' set to '{parsed}'")
