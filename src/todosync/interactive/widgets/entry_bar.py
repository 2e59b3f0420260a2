"""Entry bar with the task input, Add and Clear All buttons, and the error banner."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, Static


class EntryBar(Widget):
    """Top bar: title, input box, Add button, Clear All button and error banner."""

    DEFAULT_CSS = """
    EntryBar {
        height: auto;
        dock: top;
        background: $panel;
        padding: 0 1;
    }

    EntryBar #title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        color: $text-muted;
        padding: 1 0 0 0;
    }

    EntryBar #prompt {
        color: $text-muted;
    }

    EntryBar Horizontal {
        height: auto;
    }

    EntryBar #task-input {
        width: 1fr;
    }

    EntryBar #error-banner {
        display: none;
        background: $error 20%;
        color: $error;
        border: round $error;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the entry bar layout."""
        yield Static("todos", id="title")
        yield Static("What needs to be done?", id="prompt")
        with Horizontal():
            yield Input(placeholder="Add a new task...", id="task-input")
            yield Button("Add", variant="primary", id="add-button", disabled=True)
        yield Button("🗑 Clear All Tasks", variant="error", id="clear-all-button")
        yield Static("", id="error-banner")

    def on_mount(self) -> None:
        """Focus the input when mounted."""
        self.query_one("#task-input", Input).focus()
        self.query_one("#clear-all-button", Button).display = False

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "task-input":
            return
        self.query_one("#add-button", Button).disabled = event.input.disabled or not event.value.strip()
        self.post_message(self.PendingInputChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter submits the typed label."""
        if event.input.id != "task-input":
            return
        event.stop()
        self.post_message(self.TaskSubmitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-button":
            self.post_message(self.TaskSubmitted(self.query_one("#task-input", Input).value))
            event.stop()
        elif event.button.id == "clear-all-button":
            self.post_message(self.ClearAllRequested())
            event.stop()

    def show_state(self, pending_input: str, busy: bool, has_tasks: bool, error: str) -> None:
        """Reflect session state: input text, disabled controls, clear-all visibility, error."""
        input_widget = self.query_one("#task-input", Input)
        if input_widget.value != pending_input:
            input_widget.value = pending_input
        was_disabled = input_widget.disabled
        input_widget.disabled = busy
        if was_disabled and not busy:
            input_widget.focus()

        self.query_one("#add-button", Button).disabled = busy or not pending_input.strip()

        clear_button = self.query_one("#clear-all-button", Button)
        clear_button.display = has_tasks
        clear_button.disabled = busy

        banner = self.query_one("#error-banner", Static)
        banner.update(error)
        banner.display = bool(error)

    class TaskSubmitted(Message):
        """Message sent when the user submits the input (Enter or Add)."""

        def __init__(self, label: str) -> None:
            super().__init__()
            self.label = label

    class PendingInputChanged(Message):
        """Message sent as the user types."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    class ClearAllRequested(Message):
        """Message sent when the Clear All button is pressed."""
