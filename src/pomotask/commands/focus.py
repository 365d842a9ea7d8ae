"""Focus mode commands with a live Pomodoro timer."""

from __future__ import annotations

import asyncio

import typer
from rich.progress import BarColumn, Progress, TextColumn

from pomotask.models.focus.analytics import get_week_start
from pomotask.models.focus.state import PhaseCompleted, PomodoroState, SessionSnapshot
from pomotask.models.focus.ticker import AsyncioTickSource
from pomotask.utils.dates import to_local
from pomotask.utils.task_execution import format_hour_minute, format_month_day
from pomotask.utils.ui.formatters import (
    console,
    format_clock,
    format_duration,
    format_output,
    format_success,
    format_warning,
)

from .decorators import command_wrapper
from .utils import get_services

app = typer.Typer(help="Focus mode with Pomodoro timer", no_args_is_help=True)

_PHASE_LABELS = {
    PomodoroState.IDLE: "[dim]Idle[/dim]",
    PomodoroState.FOCUS: "[bold red]🍅 Focus[/bold red]",
    PomodoroState.BREAK: "[bold green]☕ Break[/bold green]",
    PomodoroState.PAUSED: "[yellow]Paused[/yellow]",
}


@app.command(
    "start",
    epilog="Press Ctrl-C to stop the session. Focus phases that already completed stay logged.",
)
@command_wrapper
async def start_focus(
    task_id: str | None = typer.Argument(None, help="Task to attribute the focus time to"),
    cycles: int = typer.Option(1, "--cycles", "-c", min=1, help="Focus phases to run"),
    focus_seconds: int | None = typer.Option(
        None, "--focus-seconds", min=1, help="Override the configured focus duration"
    ),
    break_seconds: int | None = typer.Option(
        None, "--break-seconds", min=1, help="Override the configured break duration"
    ),
    take_break: bool = typer.Option(
        True, "--break/--no-break", help="Take a break between focus phases"
    ),
    post: str | None = typer.Option(
        None, "--post", help="Share a post with this message when done"
    ),
) -> None:
    """Run focus phases, logging each one that completes."""
    services = get_services()
    if task_id is not None:
        task = services.tasks.get_task(task_id)
        console.print(f"Task: [bold]{task.title}[/bold]")

    pomodoro = services.create_pomodoro(
        AsyncioTickSource(), focus_duration=focus_seconds, break_duration=break_seconds
    )
    timer = pomodoro.timer
    finished = asyncio.Event()

    def on_complete(event: PhaseCompleted) -> None:
        if event.phase == PomodoroState.FOCUS:
            if pomodoro.completed_focus_phases >= cycles:
                finished.set()
            elif take_break:
                timer.start_break()
            else:
                timer.start_focus()
        else:
            timer.start_focus()

    with Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        TextColumn("{task.fields[clock]}"),
        console=console,
        transient=True,
    ) as progress:
        bar = progress.add_task(_PHASE_LABELS[PomodoroState.IDLE], total=100, clock="")

        def on_change(snapshot: SessionSnapshot) -> None:
            progress.update(
                bar,
                completed=snapshot.progress,
                description=_PHASE_LABELS[snapshot.state],
                clock=format_clock(snapshot.remaining_time),
            )

        timer.subscribe(on_change)
        timer.subscribe_completion(on_complete)
        pomodoro.start_focus(task_id)
        try:
            await finished.wait()
        finally:
            pomodoro.close()

    minutes = sum(log.duration_minutes for log in pomodoro.recorded)
    format_success(
        f"Completed {pomodoro.completed_focus_phases} focus phase(s), "
        f"{format_duration(minutes)} logged"
    )
    if pomodoro.last_error is not None:
        format_warning(f"Focus time could not be saved: {pomodoro.last_error}")

    if post is not None:
        shared = services.posts.add_post(post, pomodoro.focus_minutes_for_post())
        format_success(f"Posted: {shared.id}")


@app.command("history")
@command_wrapper
def history(
    week: bool = typer.Option(False, "--week", help="Only the current week"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List recorded focus logs, newest first."""
    services = get_services()
    logs = services.focus_logs.logs
    if week:
        week_start_day = services.settings.settings.week_start
        logs = services.focus_logs.get_logs_for_week(
            get_week_start(services.clock(), week_start_day)
        )

    logs.sort(key=lambda log: to_local(log.completed_at), reverse=True)
    rows = [
        {
            "id": log.id,
            "completed": f"{format_month_day(log.completed_at)} {format_hour_minute(log.completed_at)}",
            "minutes": log.duration_minutes,
            "task": log.task_id,
        }
        for log in logs
    ]
    format_output(rows, output)
