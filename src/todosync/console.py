"""Plain console mode: run one intent through the synchronizer and print the list."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

import click

from .api.client import TodoStoreClient
from .state.tasks import SessionState
from .sync.synchronizer import TaskSynchronizer


Intent = Callable[[TaskSynchronizer], Awaitable[None]]


class ConsoleSession:
    """One-shot console session over a fresh synchronizer."""

    def __init__(self, client: TodoStoreClient) -> None:
        self.synchronizer = TaskSynchronizer(client)

    @property
    def state(self) -> SessionState:
        return self.synchronizer.state

    async def run(self, intent: Intent, load_first: bool = False) -> bool:
        """Run ``intent``; returns False when it left an error behind."""
        if load_first:
            await self.synchronizer.reload()
            if self.state.last_error:
                self._print_error()
                return False

        await intent(self.synchronizer)
        if self.state.last_error:
            self._print_error()
            return False

        self.print_tasks()
        return True

    def print_tasks(self) -> None:
        tasks = self.state.tasks
        if not tasks:
            click.echo(click.style("No tasks, add a task", dim=True))
            return
        for task in tasks:
            click.echo(f"{click.style(f'[{task.id}]', dim=True)} {task.label}")
        click.echo(click.style(self.state.items_left, dim=True))

    def _print_error(self) -> None:
        click.echo(click.style(self.state.last_error, fg="red", bold=True), err=True)


async def reload(sync: TaskSynchronizer) -> None:
    await sync.reload()


def add(label: str) -> Intent:
    async def _add(sync: TaskSynchronizer) -> None:
        await sync.add_task(label)

    return _add


def delete(task_id: Any) -> Intent:
    async def _delete(sync: TaskSynchronizer) -> None:
        await sync.delete_task(task_id)

    return _delete


async def clear_all(sync: TaskSynchronizer) -> None:
    await sync.clear_all()
