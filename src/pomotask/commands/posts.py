"""Commands for the shared focus feed."""

from __future__ import annotations

import typer

from pomotask.utils.ui.formatters import (
    console,
    format_output,
    format_success,
    format_warning,
    get_relative_time,
)

from .decorators import command_wrapper
from .utils import get_services

app = typer.Typer(help="Share focus sessions", no_args_is_help=True)


@app.command("add")
@command_wrapper
def add_post(
    message: str = typer.Argument(..., help="What you worked on"),
    minutes: int = typer.Option(0, "--minutes", "-m", min=0, help="Focus minutes to share"),
) -> None:
    """Share a post."""
    post = get_services().posts.add_post(message, minutes)
    format_success(f"Posted: {post.id}")


@app.command("list")
@command_wrapper
def list_posts(
    when: str = typer.Option("all", "--filter", "-f", help="today, week or all"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List posts, newest first."""
    if when not in ("today", "week", "all"):
        raise typer.BadParameter("--filter must be one of: today, week, all")

    services = get_services()
    posts = services.posts.get_posts(when)

    if output != "pretty":
        format_output([p.model_dump(mode="json") for p in posts], output)
        return

    if not posts:
        console.print("[yellow]No posts yet[/yellow]")
        return

    now = services.clock()
    for post in posts:
        console.print(
            f"{post.user_icon} [bold]{post.user_name}[/bold] "
            f"[dim]{get_relative_time(post.created_at, now)} · {post.id}[/dim]"
        )
        console.print(f"  {post.message}  [red]🍅 {post.focus_minutes}m[/red]\n")


@app.command("delete")
@command_wrapper
def delete_post(post_id: str = typer.Argument(..., help="Post ID")) -> None:
    """Delete a post."""
    if get_services().posts.delete_post(post_id):
        format_success(f"Post deleted: {post_id}")
    else:
        format_warning(f"Post not found: {post_id}")
