"""Keeps the cached task list in step with the remote todo store."""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from ..api.base import AccountExistsError, AccountNotFoundError, TodoApiException
from ..api.client import TodoStoreClient
from ..state.tasks import SessionState


logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load tasks"
ADD_FAILED = "Failed to add task"
DELETE_FAILED = "Failed to delete task"
CLEAR_FAILED = "Failed to clear all tasks"

StateListener = Callable[[SessionState], None]


class TaskSynchronizer:
    """
    Translates user intents into remote calls and refreshes state afterwards.

    The remote store is the single source of truth: every successful mutation
    ends with a full ``reload()`` and ``state.tasks`` is only ever replaced
    wholesale from a reload. All remote failures are caught here and turned
    into ``state.last_error``; nothing propagates to the caller.

    Operations are not serialized against each other. ``state.busy`` is an
    advisory flag for the UI.
    """

    def __init__(self, client: TodoStoreClient, state: Optional[SessionState] = None) -> None:
        self.client = client
        self.state = state or SessionState()
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    async def mount(self) -> None:
        """Initial load when the view comes up."""
        await self.reload()

    def unmount(self) -> None:
        """Stop notifying the view. In-flight operations keep running."""
        self._listeners.clear()

    def set_pending_input(self, text: str) -> None:
        self.state.pending_input = text

    # ------------------------------------------------------------------ #
    # Intents
    # ------------------------------------------------------------------ #
    async def reload(self) -> None:
        """Replace the cached list with the remote one, provisioning the account if missing."""
        with self._busy():
            try:
                tasks = await self.client.get_tasks()
            except AccountNotFoundError:
                await self.provision_account()
                tasks = []
            except TodoApiException as exc:
                logger.error("Error loading tasks: %s", exc)
                self._update(last_error=LOAD_FAILED)
                return
            self._update(tasks=tasks)

    async def provision_account(self) -> None:
        """Create the account; an existing account counts as success. Never raises."""
        try:
            await self.client.create_user()
            logger.info("User %s created", self.client.username)
        except AccountExistsError:
            logger.info("User %s already exists", self.client.username)
        except TodoApiException as exc:
            logger.error("Error creating user %s: %s", self.client.username, exc)

    async def add_task(self, label: Optional[str] = None) -> None:
        """Submit a new task. Defaults to the pending input; blank text is ignored."""
        text = (self.state.pending_input if label is None else label).strip()
        if not text:
            return

        with self._busy():
            try:
                created = await self.client.create_task(text, is_done=False)
            except TodoApiException as exc:
                logger.error("Error adding task: %s", exc)
                self._update(last_error=ADD_FAILED)
                return
            logger.info("Task added: %r", created)
            self._update(pending_input="")
            await self.reload()

    async def delete_task(self, task_id: Any) -> None:
        with self._busy():
            try:
                await self.client.delete_task(task_id)
            except TodoApiException as exc:
                logger.error("Error deleting task %s: %s", task_id, exc)
                self._update(last_error=DELETE_FAILED)
                return
            logger.info("Task %s deleted", task_id)
            await self.reload()

    async def clear_all(self) -> None:
        """Delete every known task concurrently and wait for all of them.

        Any failed deletion fails the whole operation. Deletions that did succeed are not rolled back and the list is not
        reloaded on failure, so the cache may show tasks that are already gone.
        """
        if not self.state.tasks:
            return

        task_ids = [task.id for task in self.state.tasks]
        with self._busy():
            results = await asyncio.gather(
                *(self.client.delete_task(task_id) for task_id in task_ids),
                return_exceptions=True,
            )
            failures = [result for result in results if isinstance(result, BaseException)]
            for failure in failures:
                if not isinstance(failure, TodoApiException):
                    raise failure
            if failures:
                logger.error("Error clearing tasks (%d of %d failed): %s", len(failures), len(task_ids), failures[0])
                self._update(last_error=CLEAR_FAILED)
                return
            logger.info("All tasks cleared (%d)", len(task_ids))
            await self.reload()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    @contextmanager
    def _busy(self) -> Iterator[None]:
        self._update(busy=True, last_error="")
        try:
            yield
        finally:
            self._update(busy=False)

    def _update(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self.state, name, list(value) if name == "tasks" else value)
        for listener in list(self._listeners):
            listener(self.state)
