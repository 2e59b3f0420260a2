"""Interactive (Textual) mode."""

from .app import TodoApp

__all__ = ["TodoApp"]
