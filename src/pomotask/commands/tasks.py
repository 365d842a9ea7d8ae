"""Task list commands."""

from __future__ import annotations

import typer
from rich.table import Table

from pomotask.models.task import Task
from pomotask.services.task_service import TaskService
from pomotask.utils.task_execution import format_schedule_chip
from pomotask.utils.ui.formatters import console, format_output, format_success

from .decorators import command_wrapper
from .utils import get_services, parse_when

app = typer.Typer(help="Task management commands", no_args_is_help=True)

_STATUS_STYLE = {
    "executable": "green",
    "scheduled": "yellow",
    "time-locked": "magenta",
    "completed": "dim",
}


def _task_row(service: TaskService, task: Task) -> dict:
    status = service.evaluate(task)
    return {
        "id": task.id,
        "title": task.title,
        "schedule": format_schedule_chip(task.scheduled_at, task.has_time)
        if task.scheduled_at
        else None,
        "priority": task.priority,
        "status": status.status,
        "reason": status.reason,
    }


def _print_tasks(service: TaskService, tasks: list[Task], title: str | None = None) -> None:
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("Schedule")
    table.add_column("Priority")
    table.add_column("Status")

    for task in tasks:
        row = _task_row(service, task)
        reason = row["reason"]
        countdown = service.countdown(task)
        if row["status"] == "time-locked" and countdown:
            reason = f"{reason} ({countdown})"
        style = _STATUS_STYLE[row["status"]]
        table.add_row(
            task.id,
            task.title,
            row["schedule"] or "",
            task.priority or "",
            f"[{style}]{reason}[/{style}]",
        )
    console.print(table)


@app.command("add")
@command_wrapper
def add_task(
    title: str = typer.Argument(..., help="Task title"),
    when: str | None = typer.Option(
        None, "--when", "-w", help="Schedule as YYYY-MM-DD or YYYY-MM-DDTHH:MM"
    ),
    priority: str | None = typer.Option(None, "--priority", "-p", help="low, medium or high"),
    description: str | None = typer.Option(None, "--description", "-d", help="Notes"),
) -> None:
    """Add a task."""
    scheduled_at, has_time = parse_when(when)
    task = get_services().tasks.add_task(
        title, scheduled_at, has_time, priority=priority, description=description
    )
    format_success(f"Task added: {task.id}")


@app.command("list")
@command_wrapper
def list_tasks(
    group: bool = typer.Option(False, "--group", "-g", help="Group by executability"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List all tasks with their executability."""
    service = get_services().tasks

    if output != "pretty":
        format_output([_task_row(service, t) for t in service.tasks], output)
        return

    if not group:
        _print_tasks(service, service.tasks)
        return

    groups = service.group_by_status()
    _print_tasks(service, groups.executable, "Executable")
    _print_tasks(service, groups.locked, "Locked")
    _print_tasks(service, groups.completed, "Completed")


@app.command("update")
@command_wrapper
def update_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    when: str | None = typer.Option(None, "--when", "-w", help="New schedule"),
    clear_schedule: bool = typer.Option(False, "--clear-schedule", help="Remove the schedule"),
    priority: str | None = typer.Option(None, "--priority", "-p", help="low, medium or high"),
    description: str | None = typer.Option(None, "--description", "-d", help="Notes"),
) -> None:
    """Update fields of a task."""
    updates: dict = {}
    if title is not None:
        updates["title"] = title
    if priority is not None:
        updates["priority"] = priority
    if description is not None:
        updates["description"] = description
    if clear_schedule:
        updates["scheduled_at"] = None
        updates["has_time"] = False
    elif when is not None:
        updates["scheduled_at"], updates["has_time"] = parse_when(when)

    if not updates:
        console.print("[yellow]Nothing to update[/yellow]")
        return

    task = get_services().tasks.update_task(task_id, **updates)
    format_success(f"Task updated: {task.id}")


@app.command("toggle")
@command_wrapper
def toggle_task(task_id: str = typer.Argument(..., help="Task ID")) -> None:
    """Flip a task between open and completed."""
    task = get_services().tasks.toggle_task_completion(task_id)
    state = "completed" if task.is_completed else "reopened"
    format_success(f"Task {state}: {task.id}")


@app.command("delete")
@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    if not yes and not typer.confirm(f"Delete task {task_id}?"):
        raise typer.Exit(0)
    get_services().tasks.delete_task(task_id)
    format_success(f"Task deleted: {task_id}")


@app.command("today")
@command_wrapper
def today(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show today's reachable tasks and the completion rate."""
    service = get_services().tasks
    todays = service.get_todays_tasks()
    rate = service.get_completion_rate()

    if output != "pretty":
        format_output(
            {"completion_rate": rate, "tasks": [_task_row(service, t) for t in todays]},
            output,
        )
        return

    _print_tasks(service, todays, "Today")
    console.print(f"Completion rate: [bold]{rate}%[/bold]")
