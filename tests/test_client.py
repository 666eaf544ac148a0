"""Tests for todo_api.client: the HTTP client against a live test server."""

from __future__ import annotations

from aiohttp import web
from aiohttp.test_utils import AioHTTPTestCase

from todo_api.client import TodoClient, TodoClientError
from todo_api.db import get_connection
from todo_api.rest_server import create_app
from todo_api.store import DuckDBTodoStore
from todo_core.identifiers import new_object_id
from todo_core.types import Refinement, Todo, TodoFilters

SAMPLES = [
    Todo(owner="Chris", status=False, body="UMM is cool", category="software design"),
    Todo(owner="Pat", status=True, body="IBM is not cool", category="homework"),
    Todo(owner="Jamie", status=False, body="Frogs, are cool", category="groceries"),
]


class TestTodoClient(AioHTTPTestCase):
    """TodoClient round trips through the real application."""

    async def get_application(self) -> web.Application:
        self.conn = get_connection(":memory:")
        self.store = DuckDBTodoStore(self.conn)
        self.ids = [self.store.insert(todo) for todo in SAMPLES]
        return create_app(self.store)

    async def asyncSetUp(self) -> None:
        await super().asyncSetUp()
        base_url = str(self.server.make_url("/api/"))
        self.todo_client = TodoClient(base_url, session=self.client.session)

    async def asyncTearDown(self) -> None:
        await super().asyncTearDown()
        self.conn.close()

    async def test_get_todos_without_filters(self) -> None:
        todos = await self.todo_client.get_todos()
        assert [t.owner for t in todos] == ["Chris", "Jamie", "Pat"]
        assert all(isinstance(t, Todo) for t in todos)

    async def test_get_todos_sends_only_set_filters(self) -> None:
        todos = await self.todo_client.get_todos(
            TodoFilters(category="SOFTWARE", sort_order="desc")
        )
        assert [t.owner for t in todos] == ["Chris"]

    async def test_get_todos_sorted(self) -> None:
        todos = await self.todo_client.get_todos(TodoFilters(sort_by="body"))
        assert [t.body for t in todos] == [
            "Frogs, are cool",
            "IBM is not cool",
            "UMM is cool",
        ]

    async def test_get_todo_by_id(self) -> None:
        todo = await self.todo_client.get_todo_by_id(self.ids[2])
        assert todo.id == self.ids[2]
        assert todo.owner == "Jamie"

    async def test_get_todo_by_id_not_found(self) -> None:
        with self.assertRaises(TodoClientError) as ctx:
            await self.todo_client.get_todo_by_id(new_object_id())
        assert ctx.exception.status == 404
        assert ctx.exception.message == "The requested todo was not found"

    async def test_get_todo_by_id_malformed(self) -> None:
        with self.assertRaises(TodoClientError) as ctx:
            await self.todo_client.get_todo_by_id("chris_id")
        assert ctx.exception.status == 400

    async def test_add_todo_returns_server_id(self) -> None:
        new_id = await self.todo_client.add_todo(
            Todo(owner="Sam", status=False, body="Walk the dog", category="homework")
        )
        assert self.store.get(new_id).owner == "Sam"

    async def test_add_todo_from_mapping(self) -> None:
        new_id = await self.todo_client.add_todo(
            {"owner": "Sam", "status": "complete", "body": "Shop", "category": "groceries"}
        )
        assert self.store.get(new_id).status is True

    async def test_add_todo_validation_error(self) -> None:
        with self.assertRaises(TodoClientError) as ctx:
            await self.todo_client.add_todo(
                {"owner": "Sam", "status": True, "body": "Shop", "category": "chores"}
            )
        assert ctx.exception.status == 400
        assert ctx.exception.message == "Todo must have a legal category"

    async def test_delete_todo(self) -> None:
        await self.todo_client.delete_todo(self.ids[0])
        assert self.store.count() == 2

        with self.assertRaises(TodoClientError) as ctx:
            await self.todo_client.delete_todo(self.ids[0])
        assert ctx.exception.status == 404

    async def test_fetch_then_refine_locally(self) -> None:
        """Server narrows by body, the client narrows further without a request."""
        todos = await self.todo_client.get_todos(TodoFilters(body="cool"))
        refined = self.todo_client.filter_todos(
            todos, Refinement(owner="i", status=False, sort_by="body", limit=1)
        )
        assert [t.owner for t in refined] == ["Jamie"]


def test_todo_url_joins_base():
    assert TodoClient("http://localhost:4567/api/").todo_url == (
        "http://localhost:4567/api/todos"
    )
    assert TodoClient("http://localhost:4567/api").todo_url == (
        "http://localhost:4567/api/todos"
    )


def test_filter_todos_makes_no_request():
    """filter_todos works without any session or server."""
    refined = TodoClient.filter_todos(SAMPLES, Refinement(owner="i", body="M"))
    assert [t.owner for t in refined] == ["Chris"]
