"""Task and session state held by the client."""

from __future__ import annotations

from typing import Any, Dict, List


class Task:
    """Read-only cached copy of a task owned by the remote store."""

    def __init__(self, id: Any, label: str, is_done: bool = False) -> None:
        self.id = id
        self.label = label
        self.is_done = is_done

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "label": self.label, "is_done": self.is_done}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Task":
        """Create from the remote store's JSON representation."""
        return Task(
            id=data.get("id"),
            label=str(data.get("label", "")),
            is_done=bool(data.get("is_done", False)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Task(id={self.id!r}, label={self.label!r}, is_done={self.is_done!r})"


class SessionState:
    """In-process UI state: the cached task list plus transient flags."""

    def __init__(self) -> None:
        self.tasks: List[Task] = []
        self.pending_input = ""
        self.busy = False
        self.last_error = ""

    @property
    def items_left(self) -> str:
        count = len(self.tasks)
        return f"{count} item{'' if count == 1 else 's'} left"
