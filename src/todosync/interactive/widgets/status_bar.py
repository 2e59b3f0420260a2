"""Footer line with the item count and a sync indicator."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static


class StatusBar(Widget):
    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        padding: 0 1;
    }

    StatusBar #items-left {
        width: 1fr;
        color: $text-muted;
    }

    StatusBar #syncing {
        width: auto;
        color: $accent;
    }
    """

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static("", id="items-left")
            yield Static("", id="syncing")

    def show_state(self, items_left: str, has_tasks: bool, busy: bool) -> None:
        self.query_one("#items-left", Static).update(items_left if has_tasks else "")
        self.query_one("#syncing", Static).update("Syncing..." if busy and has_tasks else "")
