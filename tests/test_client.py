import asyncio
import json

import httpx
import pytest

from todosync.api.base import AccountExistsError, AccountNotFoundError, TodoApiError
from todosync.api.client import TodoStoreClient
from todosync.state.tasks import Task

from conftest import USERNAME


def test_every_request_sends_json_content_type(server, client) -> None:
    server.seed(USERNAME, "walk dog")

    asyncio.run(client.get_tasks())
    asyncio.run(client.create_task("feed cat"))
    asyncio.run(client.delete_task(1))

    assert [r.headers["content-type"] for r in server.requests] == ["application/json"] * 3
    assert all("authorization" not in r.headers for r in server.requests)


def test_get_tasks_preserves_remote_order(server, client) -> None:
    server.seed(USERNAME, "first", "second", "third")

    tasks = asyncio.run(client.get_tasks())

    assert [t.label for t in tasks] == ["first", "second", "third"]
    assert server.calls == [("GET", f"/users/{USERNAME}")]


def test_get_tasks_missing_todos_key_is_empty() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"name": USERNAME}))
    client = TodoStoreClient(base_url="http://todo.test/todo", username=USERNAME, transport=transport)

    assert asyncio.run(client.get_tasks()) == []


def test_get_tasks_non_list_todos_is_malformed() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"name": USERNAME, "todos": 5}))
    client = TodoStoreClient(base_url="http://todo.test/todo", username=USERNAME, transport=transport)

    with pytest.raises(TodoApiError, match="Malformed response body"):
        asyncio.run(client.get_tasks())

def test_get_tasks_unknown_user_raises_not_found(client) -> None:
    with pytest.raises(AccountNotFoundError):
        asyncio.run(client.get_tasks())


def test_get_tasks_server_error_carries_status(server, client) -> None:
    server.failures[("GET", f"/users/{USERNAME}")] = 503

    with pytest.raises(TodoApiError) as excinfo:
        asyncio.run(client.get_tasks())
    assert excinfo.value.status_code == 503


def test_create_user_twice_reports_existing_account(server, client) -> None:
    asyncio.run(client.create_user())
    assert USERNAME in server.accounts

    with pytest.raises(AccountExistsError):
        asyncio.run(client.create_user())


def test_create_task_posts_label_and_flag(server, client) -> None:
    server.seed(USERNAME)

    created = asyncio.run(client.create_task("buy milk"))

    request = server.requests[-1]
    assert (request.method, request.url.path) == ("POST", f"/todo/todos/{USERNAME}")
    assert json.loads(request.content) == {"label": "buy milk", "is_done": False}
    assert created == Task(id=1, label="buy milk", is_done=False)


def test_delete_unknown_task_fails(server, client) -> None:
    server.seed(USERNAME)

    with pytest.raises(TodoApiError) as excinfo:
        asyncio.run(client.delete_task(42))
    assert excinfo.value.status_code == 404


def test_network_error_is_wrapped(server, client) -> None:
    server.failures[("DELETE", "/todos/7")] = httpx.ConnectError("connection refused")

    with pytest.raises(TodoApiError) as excinfo:
        asyncio.run(client.delete_task(7))
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_from_config_uses_api_section(isolated_config, monkeypatch) -> None:
    from todosync.config import Config

    monkeypatch.setenv("TODOSYNC_API_USERNAME", "bob")
    monkeypatch.setenv("TODOSYNC_API_BASE_URL", "http://example.test/todo/")
    monkeypatch.setenv("TODOSYNC_API_TIMEOUT_SECONDS", "2.5")

    client = TodoStoreClient.from_config(Config())

    assert client.username == "bob"
    assert client.base_url == "http://example.test/todo"
    assert client.timeout == 2.5
