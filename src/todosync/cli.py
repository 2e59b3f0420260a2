"""todosync CLI entry point."""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from . import __version__, console
from .api.client import TodoStoreClient
from .config import Config
from .utils.logger import setup_logging


def _build_client(ctx: click.Context) -> TodoStoreClient:
    return TodoStoreClient.from_config(ctx.obj["config"])


def _run_console(ctx: click.Context, intent: console.Intent, load_first: bool = False) -> None:
    config: Config = ctx.obj["config"]
    setup_logging(config.log_file, config.log_level, console=True)

    session = console.ConsoleSession(_build_client(ctx))
    if not asyncio.run(session.run(intent, load_first=load_first)):
        ctx.exit(1)


def _start_tui(ctx: click.Context) -> None:
    """Helper to launch the Textual TUI."""
    config: Config = ctx.obj["config"]
    setup_logging(config.log_file, config.log_level, console=False)

    from .interactive import TodoApp

    app = TodoApp(_build_client(ctx))
    app.run()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--base-url", default=None, help="Todo API base URL (overrides config)")
@click.option("--username", default=None, help="Account that owns the task list (overrides config)")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], username: Optional[str]) -> None:
    """todosync - a to-do list kept in a remote todo service."""
    config = Config()
    if base_url:
        config.set("api.base_url", base_url)
    if username:
        config.set("api.username", username)
    ctx.obj = {"config": config}

    if ctx.invoked_subcommand is None:
        _start_tui(ctx)


@main.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Start Textual TUI."""
    _start_tui(ctx)


@main.command(name="list")
@click.pass_context
def list_tasks(ctx: click.Context) -> None:
    """Print the task list."""
    _run_console(ctx, console.reload)


@main.command()
@click.argument("label", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, label: tuple) -> None:
    """Add a task."""
    _run_console(ctx, console.add(" ".join(label)))


@main.command()
@click.argument("task_id")
@click.pass_context
def delete(ctx: click.Context, task_id: str) -> None:
    """Delete a task by id."""
    _run_console(ctx, console.delete(task_id))


@main.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete every task."""
    _run_console(ctx, console.clear_all, load_first=True)


if __name__ == "__main__":
    main()
