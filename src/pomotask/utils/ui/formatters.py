"""Output formatters for the CLI and pure text helpers for durations and dates."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pomotask.utils.dates import WeekStartDay, to_local

console = Console()

SHORT_DAY_LABELS = ["月", "火", "水", "木", "金", "土", "日"]
LONG_DAY_LABELS = ["月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日", "日曜日"]


# ============================================================================
# Durations and dates
# ============================================================================


@dataclass(frozen=True)
class DurationParts:
    hours: int
    minutes: int


def format_duration_parts(minutes: int) -> DurationParts:
    """Split minutes into whole hours and remaining minutes."""
    return DurationParts(hours=minutes // 60, minutes=minutes % 60)


def format_duration(minutes: int) -> str:
    """Format minutes as ``1h 45m``, or ``45m`` under an hour."""
    parts = format_duration_parts(minutes)
    if parts.hours > 0:
        return f"{parts.hours}h {parts.minutes}m"
    return f"{parts.minutes}m"


def format_clock(seconds: int) -> str:
    """Format seconds as a ``MM:SS`` countdown."""
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins:02d}:{secs:02d}"


def format_locale_date(value: datetime) -> str:
    """Japanese locale date, e.g. ``2026/1/19``."""
    local = to_local(value)
    return f"{local.year}/{local.month}/{local.day}"


def get_relative_time(value: datetime, now: datetime) -> str:
    """Relative time in Japanese: 今, N分前, N時間前, N日前, else the date."""
    diff_ms = (to_local(now) - to_local(value)).total_seconds() * 1000
    diff_mins = int(diff_ms // 60000)
    diff_hours = diff_mins // 60
    diff_days = diff_hours // 24

    if diff_mins < 1:
        return "今"
    if diff_mins < 60:
        return f"{diff_mins}分前"
    if diff_hours < 24:
        return f"{diff_hours}時間前"
    if diff_days < 7:
        return f"{diff_days}日前"
    return format_locale_date(value)


def get_day_label(day_index: int, fmt: Literal["short", "long"] = "short") -> str:
    """Japanese day name for a Monday-first index 0-6."""
    labels = SHORT_DAY_LABELS if fmt == "short" else LONG_DAY_LABELS
    return labels[day_index]


def get_week_day_labels(
    week_start_day: WeekStartDay = "mon", fmt: Literal["short", "long"] = "short"
) -> list[str]:
    """Day labels in breakdown order for the given week-start convention."""
    shift = 6 if week_start_day == "sun" else 0
    return [get_day_label((i + shift) % 7, fmt) for i in range(7)]


def render_progress_bar(value: float, max_value: float, width: int = 10) -> str:
    """Render a progress bar using block characters."""
    if max_value == 0:
        ratio = 0.0
    else:
        ratio = min(value / max_value, 1.0)
    filled = int(ratio * width)
    return "█" * filled + "░" * (width - filled)


# ============================================================================
# Console output
# ============================================================================


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Print *data* as json, yaml, or a Rich table for lists of dicts."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(json.loads(json.dumps(data, default=str)), allow_unicode=True))
    elif isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of flat dicts as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    columns = list(items[0].keys())
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for item in items:
        table.add_row(*["" if item.get(c) is None else str(item.get(c)) for c in columns])

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single dict as a two-column key/value table."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="bold cyan")
    table.add_column("Value")
    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(formatted_key, "" if value is None else str(value))
    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
