"""Async HTTP client for the remote todo store."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import DEFAULT_BASE_URL, DEFAULT_USERNAME, ConfigLoader
from ..state.tasks import Task
from .base import AccountExistsError, AccountNotFoundError, TodoApiError


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class TodoStoreClient:
    """Thin wrapper over the four endpoints of the todo REST API.

    Every call opens its own ``httpx.AsyncClient`` so concurrent requests
    (the bulk delete fan-out) never share connection state.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        username: str = DEFAULT_USERNAME,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_config(
        cls, config: ConfigLoader, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "TodoStoreClient":
        return cls(
            base_url=config.base_url,
            username=config.username,
            timeout=config.timeout,
            transport=transport,
        )

    async def create_user(self) -> None:
        """Create the account. Raises AccountExistsError on 400."""
        resp = await self._request("POST", f"/users/{self.username}")
        if resp.status_code == 400:
            raise AccountExistsError(f"User {self.username} already exists")
        self._ensure_success(resp, "create user")

    async def get_tasks(self) -> List[Task]:
        """Fetch the account and return its todos in remote order."""
        resp = await self._request("GET", f"/users/{self.username}")
        if resp.status_code == 404:
            raise AccountNotFoundError(f"User {self.username} not found")
        self._ensure_success(resp, "load tasks")

        data = self._json(resp)
        todos = data.get("todos") if isinstance(data, dict) else None
        if todos is None:
            return []
        if not isinstance(todos, list):
            raise TodoApiError(f"Malformed response body: todos is {type(todos).__name__}", status_code=resp.status_code)
        return [Task.from_dict(item) for item in todos if isinstance(item, dict)]

    async def create_task(self, label: str, is_done: bool = False) -> Task:
        """Create a todo for the account and return the created representation."""
        payload = {"label": label, "is_done": is_done}
        resp = await self._request("POST", f"/todos/{self.username}", json=payload)
        self._ensure_success(resp, "add task")

        data = self._json(resp)
        return Task.from_dict(data if isinstance(data, dict) else payload)

    async def delete_task(self, task_id: Any) -> None:
        resp = await self._request("DELETE", f"/todos/{task_id}")
        self._ensure_success(resp, "delete task")

    async def _request(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.request(method, url, json=json, headers=JSON_HEADERS)
            except httpx.HTTPError as exc:
                raise TodoApiError(f"{method} {url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    @staticmethod
    def _ensure_success(resp: httpx.Response, action: str) -> None:
        if resp.is_success:
            return
        raise TodoApiError(
            f"Failed to {action}: HTTP {resp.status_code} {resp.text[:200]}",
            status_code=resp.status_code,
        )

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise TodoApiError(f"Malformed response body: {exc}", status_code=resp.status_code) from exc
