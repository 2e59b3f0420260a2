"""Textual application for interactive mode."""

from __future__ import annotations

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from .widgets import EntryBar, StatusBar, TaskListWidget
from ..api.client import TodoStoreClient
from ..config import Config
from ..state.tasks import SessionState
from ..sync.synchronizer import TaskSynchronizer


class TodoApp(App):
    """Full-screen to-do list mirroring the remote store."""

    TITLE = "todos"

    CSS = """
    Screen {
        layout: vertical;
        overflow: hidden;
    }

    #task-list-widget {
        height: 1fr;
        border: tall $primary;
        padding: 0;
        overflow-y: auto;
    }

    Footer {
        background: $primary;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "reload", "Reload", priority=True),
        Binding("ctrl+l", "clear_all", "Clear All", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: Optional[TodoStoreClient] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if client is None:
            client = TodoStoreClient.from_config(Config())
        self.synchronizer = TaskSynchronizer(client)
        self.sub_title = f"{client.username} @ {client.base_url}"

    def compose(self) -> ComposeResult:
        self.entry_bar = EntryBar(id="entry-bar")
        self.task_list = TaskListWidget(id="task-list-widget")
        self.status_bar = StatusBar(id="status-bar")

        yield self.entry_bar
        yield self.task_list
        yield self.status_bar
        yield Footer()

    def on_mount(self) -> None:
        self.synchronizer.subscribe(self._render_state)
        self._render_state(self.synchronizer.state)
        self.run_worker(self.synchronizer.mount())

    def on_unmount(self) -> None:
        self.synchronizer.unmount()

    def _render_state(self, state: SessionState) -> None:
        """Re-render every widget from the session state."""
        has_tasks = bool(state.tasks)
        self.entry_bar.show_state(state.pending_input, state.busy, has_tasks, state.last_error)
        self.task_list.update_tasks(state.tasks, busy=state.busy)
        self.status_bar.show_state(state.items_left, has_tasks, state.busy)

    def on_entry_bar_pending_input_changed(self, event: EntryBar.PendingInputChanged) -> None:
        self.synchronizer.set_pending_input(event.text)

    def on_entry_bar_task_submitted(self, event: EntryBar.TaskSubmitted) -> None:
        self.synchronizer.set_pending_input(event.label)
        self.run_worker(self.synchronizer.add_task())

    def on_entry_bar_clear_all_requested(self, event: EntryBar.ClearAllRequested) -> None:
        self.action_clear_all()

    def on_task_list_widget_delete_requested(self, event: TaskListWidget.DeleteRequested) -> None:
        self.run_worker(self.synchronizer.delete_task(event.task_id))

    def action_reload(self) -> None:
        self.run_worker(self.synchronizer.reload())

    def action_clear_all(self) -> None:
        self.run_worker(self.synchronizer.clear_all())
