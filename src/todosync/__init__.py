"""todosync - a to-do list kept in a remote todo service."""

__version__ = "0.1.0"

from .config import Config
from .state.tasks import SessionState, Task
from .sync.synchronizer import TaskSynchronizer

__all__ = ["Config", "SessionState", "Task", "TaskSynchronizer"]
