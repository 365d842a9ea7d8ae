"""Configuration management commands."""

from __future__ import annotations

import json

import typer

from pomotask.services.config_service import get_config_service
from pomotask.utils.ui.formatters import console, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands", no_args_is_help=True)


def _parse_value(value: str):
    """Read JSON scalars (numbers, booleans, null) and fall back to the raw string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("json", "--output", "-o", help="Output format"),
) -> None:
    """Show the current configuration."""
    service = get_config_service()
    format_output(service.config.model_dump(mode="json"), output)
    console.print(f"[dim]{service.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(key: str = typer.Argument(..., help="Dotted key, e.g. pomodoro.focus_duration")) -> None:
    """Get a configuration value."""
    console.print(get_config_service().get_value(key))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dotted key, e.g. pomodoro.focus_duration"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed = _parse_value(value)
    get_config_service().set_value(key, parsed)
    format_success(f"Configuration '{key}' set to '{parsed}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset the configuration?"):
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
