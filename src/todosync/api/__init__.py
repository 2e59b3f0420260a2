"""Remote todo store client."""

from .base import AccountExistsError, AccountNotFoundError, TodoApiError, TodoApiException
from .client import TodoStoreClient

__all__ = [
    "AccountExistsError",
    "AccountNotFoundError",
    "TodoApiError",
    "TodoApiException",
    "TodoStoreClient",
]
