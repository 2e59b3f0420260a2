"""Exceptions raised by the remote todo store client."""

from __future__ import annotations

from typing import Optional


class TodoApiException(Exception):
    """Base exception for remote store errors."""


class AccountNotFoundError(TodoApiException):
    """Raised when the account does not exist on the remote store (404)."""


class AccountExistsError(TodoApiException):
    """Raised when creating an account that already exists (400)."""


class TodoApiError(TodoApiException):
    """Raised on transport failures and unexpected response statuses."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
