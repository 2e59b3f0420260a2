"""State management modules."""

from .tasks import SessionState, Task

__all__ = ["SessionState", "Task"]
