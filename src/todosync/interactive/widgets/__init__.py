"""Interactive mode widgets."""

from .entry_bar import EntryBar
from .status_bar import StatusBar
from .task_list import DeleteButton, TaskListWidget

__all__ = [
    "DeleteButton",
    "EntryBar",
    "StatusBar",
    "TaskListWidget",
]
