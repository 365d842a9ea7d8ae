"""Main entry point for the pomotask CLI."""

import typer

from pomotask import __version__
from pomotask.commands import config, focus, posts, settings, stats, tasks
from pomotask.exceptions import PomotaskError
from pomotask.services.config_service import get_config_service
from pomotask.utils.logger import get_logger
from pomotask.utils.typer_helpers import SuggestingGroup
from pomotask.utils.ui.formatters import console

app = typer.Typer(
    name="pomotask",
    cls=SuggestingGroup,
    help="Pomodoro timer, schedulable tasks and weekly focus statistics",
    no_args_is_help=True,
)

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(focus.app, name="focus", help="Pomodoro focus sessions")
app.add_typer(stats.app, name="stats", help="Focus statistics")
app.add_typer(posts.app, name="posts", help="Share focus sessions")
app.add_typer(settings.app, name="settings", help="User preferences")
app.add_typer(config.app, name="config", help="Configuration management")


@app.callback()
def apply_output_config() -> None:
    """Apply the output section of the configuration to the shared console."""
    try:
        color = get_config_service().config.output.color
    except PomotaskError as e:
        # the config commands report a broken file themselves
        get_logger(__name__).warning("output config not applied: %s", e)
        return
    console.no_color = not color


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]pomotask[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
