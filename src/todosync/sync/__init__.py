"""Client-side synchronization with the remote store."""

from .synchronizer import (
    ADD_FAILED,
    CLEAR_FAILED,
    DELETE_FAILED,
    LOAD_FAILED,
    TaskSynchronizer,
)

__all__ = ["TaskSynchronizer", "LOAD_FAILED", "ADD_FAILED", "DELETE_FAILED", "CLEAR_FAILED"]
