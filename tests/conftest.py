from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from todosync.api.client import TodoStoreClient


BASE_URL = "http://todo.test/todo"
USERNAME = "alice"

Failure = Union[int, Exception]


class TodoServer:
    """
    In-memory stand-in for the remote todo service, served through httpx.MockTransport.

    ``failures`` maps ``(method, path)`` to a status code to return or an
    exception to raise instead of handling the request.
    """

    def __init__(self) -> None:
        self.accounts: Dict[str, List[Dict[str, Any]]] = {}
        self.failures: Dict[Tuple[str, str], Failure] = {}
        self.requests: List[httpx.Request] = []
        self.before_request: Optional[Callable[[httpx.Request], Awaitable[None]]] = None
        self._next_id = 1

    def seed(self, username: str = USERNAME, *labels: str) -> List[Dict[str, Any]]:
        todos = self.accounts.setdefault(username, [])
        for label in labels:
            todos.append(self._new_todo(label, False))
        return todos

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def calls(self) -> List[Tuple[str, str]]:
        return [(r.method, self._path(r)) for r in self.requests]

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.before_request is not None:
            await self.before_request(request)

        path = self._path(request)
        failure = self.failures.get((request.method, path))
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(failure, json={"detail": "server exploded"})

        kind, _, ident = path.strip("/").partition("/")
        if kind == "users":
            return self._users(request.method, ident)
        if kind == "todos":
            return self._todos(request, ident)
        return httpx.Response(404, json={"detail": "Not Found"})

    def _users(self, method: str, name: str) -> httpx.Response:
        if method == "POST":
            if name in self.accounts:
                return httpx.Response(400, json={"detail": "User already exists."})
            self.accounts[name] = []
            return httpx.Response(201, json={"name": name, "id": len(self.accounts)})
        if name not in self.accounts:
            return httpx.Response(404, json={"detail": f"User {name} doesn't exist."})
        return httpx.Response(200, json={"name": name, "todos": list(self.accounts[name])})

    def _todos(self, request: httpx.Request, ident: str) -> httpx.Response:
        if request.method == "POST":
            if ident not in self.accounts:
                return httpx.Response(404, json={"detail": "User not found"})
            body = json.loads(request.content)
            todo = self._new_todo(body["label"], body["is_done"])
            self.accounts[ident].append(todo)
            return httpx.Response(201, json=todo)

        for todos in self.accounts.values():
            for todo in todos:
                if str(todo["id"]) == ident:
                    todos.remove(todo)
                    return httpx.Response(204)
        return httpx.Response(404, json={"detail": "Todo not found"})

    def _new_todo(self, label: str, is_done: bool) -> Dict[str, Any]:
        todo = {"id": self._next_id, "label": label, "is_done": is_done}
        self._next_id += 1
        return todo

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.path[len("/todo") :]


@pytest.fixture()
def server() -> TodoServer:
    return TodoServer()


@pytest.fixture()
def client(server: TodoServer) -> TodoStoreClient:
    return TodoStoreClient(base_url=BASE_URL, username=USERNAME, transport=server.transport)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config reads/writes under tmp_path and drop any TODOSYNC_* env."""
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)

    for key in list(os.environ):
        if key.startswith("TODOSYNC_"):
            monkeypatch.delenv(key)
    return config_home
