"""Statistics commands for focus sessions."""

from __future__ import annotations

from datetime import date

import typer

from pomotask.utils.ui.formatters import (
    console,
    format_duration,
    format_locale_date,
    format_output,
    get_week_day_labels,
    render_progress_bar,
)

from .decorators import command_wrapper
from .utils import get_services

app = typer.Typer(help="Focus statistics", no_args_is_help=True)


def _parse_date(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{value}', use YYYY-MM-DD") from e


@app.command("week")
@command_wrapper
def show_week(
    on: str | None = typer.Option(None, "--date", help="Any day of the week (YYYY-MM-DD)"),
    week_start: str | None = typer.Option(
        None, "--week-start", help="mon or sun (default: from settings)"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show focus totals for a week."""
    services = get_services()
    week_start_day = week_start or services.settings.settings.week_start
    if week_start_day not in ("mon", "sun"):
        raise typer.BadParameter("--week-start must be 'mon' or 'sun'")

    reference = _parse_date(on) or services.clock()
    stats = services.focus_logs.weekly_stats(week_start_day, reference)
    labels = get_week_day_labels(week_start_day)

    if output != "pretty":
        format_output(
            {
                "start_date": stats.start_date.isoformat(),
                "end_date": stats.end_date.isoformat(),
                "total_focus_minutes": stats.total_focus_minutes,
                "pomodoro_count": stats.pomodoro_count,
                "daily_breakdown": stats.daily_breakdown,
            },
            output,
        )
        return

    console.print(
        f"\n[bold cyan]🍅 Week {format_locale_date(stats.start_date)}"
        f" - {format_locale_date(stats.end_date)}[/bold cyan]\n"
    )
    console.print(f"Total Focus Time: [bold]{format_duration(stats.total_focus_minutes)}[/bold]")
    console.print(f"Pomodoros: [bold]{stats.pomodoro_count}[/bold]\n")

    peak = max(stats.daily_breakdown)
    for label, count in zip(labels, stats.daily_breakdown):
        console.print(f"  {label} {render_progress_bar(count, peak)} {count}")


@app.command("day")
@command_wrapper
def show_day(
    on: str | None = typer.Option(None, "--date", help="Day to summarize (YYYY-MM-DD)"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show focus totals for a single day."""
    services = get_services()
    stats = services.focus_logs.daily_stats(_parse_date(on))

    if output != "pretty":
        format_output(
            {
                "date": stats.date.isoformat(),
                "focus_minutes": stats.focus_minutes,
                "pomodoro_count": stats.pomodoro_count,
            },
            output,
        )
        return

    console.print(f"\n[bold cyan]🍅 Focus Summary - {stats.date.isoformat()}[/bold cyan]\n")
    console.print(f"Total Focus Time: [bold]{format_duration(stats.focus_minutes)}[/bold]")
    console.print(f"Pomodoros: [bold]{stats.pomodoro_count}[/bold]")
