"""Task list widget for interactive mode."""

from __future__ import annotations

from typing import Any, List

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Label, ListItem, ListView, Static

from ...state.tasks import Task


class DeleteButton(Button):
    """Per-row delete affordance carrying the remote task id."""

    def __init__(self, task_id: Any) -> None:
        super().__init__("✕", variant="error", classes="delete-button")
        self.task_id = task_id


class TaskListWidget(Widget):
    """Widget displaying the cached task list with a delete button per row."""

    DEFAULT_CSS = """
    TaskListWidget Vertical {
        height: 100%;
    }

    TaskListWidget ListView {
        height: 1fr;
    }

    TaskListWidget ListItem Horizontal {
        height: auto;
    }

    TaskListWidget ListItem Label {
        width: 1fr;
        padding: 1 1;
    }

    TaskListWidget .delete-button {
        min-width: 5;
        width: 5;
    }

    TaskListWidget #task-list-empty {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
        padding: 1;
    }
    """

    tasks: List[Task] = reactive([], layout=True)
    busy: bool = reactive(False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "Tasks"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("No tasks, add a task", id="task-list-empty")
            yield ListView(id="task-list-view")

    def watch_tasks(self, tasks: List[Task]) -> None:
        list_view = self.query_one("#task-list-view", ListView)
        list_view.clear()

        for task in tasks:
            text = Text()
            text.append(f"[{task.id}] ", style="dim")
            text.append(task.label)

            button = DeleteButton(task.id)
            button.disabled = self.busy
            list_view.append(ListItem(Horizontal(Label(text), button)))

        self._refresh_placeholder()

    def watch_busy(self, busy: bool) -> None:
        for button in self.query(DeleteButton):
            button.disabled = busy
        self._refresh_placeholder()

    def _refresh_placeholder(self) -> None:
        placeholder = self.query_one("#task-list-empty", Static)
        placeholder.display = not self.tasks
        placeholder.update("Loading tasks..." if self.busy else "No tasks, add a task")

    def update_tasks(self, tasks: List[Task], busy: bool = False) -> None:
        self.busy = busy
        self.tasks = list(tasks)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, DeleteButton):
            self.post_message(self.DeleteRequested(event.button.task_id))
            event.stop()

    class DeleteRequested(Message):
        """Message sent when a row's delete button is pressed."""

        def __init__(self, task_id: Any) -> None:
            super().__init__()
            self.task_id = task_id
