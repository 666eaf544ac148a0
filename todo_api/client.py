"""HTTP client for the todo API.

Fetches lists with server-side filtering, then refines them locally with
filter_todos() without another request.

Usage:
    async with TodoClient("http://localhost:4567/api/") as client:
        todos = await client.get_todos(TodoFilters(category="home"))
        shown = client.filter_todos(todos, Refinement(owner="i", limit=10))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import aiohttp

from todo_core.refine import refine_todos
from todo_core.types import Refinement, Todo, TodoFilters

logger = logging.getLogger(__name__)


class TodoClientError(Exception):
    """The API answered with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"Todo API error {status}: {message}")
        self.status = status
        self.message = message


class TodoClient:
    """Async client for /api/todos.

    Args:
        base_url: API root, e.g. "http://localhost:4567/api/".
        session: Optional shared aiohttp session. When omitted the client
            opens its own on first use and closes it in close().
    """

    def __init__(
        self, base_url: str, session: aiohttp.ClientSession | None = None
    ) -> None:
        self.todo_url = base_url.rstrip("/") + "/todos"
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> TodoClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def _request(
        self, method: str, url: str, **kwargs: Any
    ) -> tuple[int, Any]:
        async with self._get_session().request(method, url, **kwargs) as resp:
            data = None
            if resp.content_type == "application/json":
                data = await resp.json()
            if resp.status >= 400:
                message = resp.reason
                if isinstance(data, dict):
                    message = data.get("error", message)
                raise TodoClientError(resp.status, message or "")
            return resp.status, data

    async def get_todos(self, filters: TodoFilters | None = None) -> list[Todo]:
        """Todos from the server, filtered and ordered there.

        Only the filter keys that are set are sent as query parameters.
        """
        params = (filters or TodoFilters()).to_query()
        _, data = await self._request("GET", self.todo_url, params=params)
        logger.debug(f"Fetched {len(data)} todo(s) with {params}")
        return [Todo.from_dict(item) for item in data]

    async def get_todo_by_id(self, id: str) -> Todo:
        """One todo by id."""
        _, data = await self._request("GET", f"{self.todo_url}/{id}")
        return Todo.from_dict(data)

    async def add_todo(self, todo: Todo | Mapping[str, Any]) -> str:
        """Create a todo and return the id the server assigned."""
        if isinstance(todo, Todo):
            payload = {k: v for k, v in todo.to_dict().items() if k != "_id"}
        else:
            payload = dict(todo)
        _, data = await self._request("POST", self.todo_url, json=payload)
        return data["id"]

    async def delete_todo(self, id: str) -> None:
        """Delete a todo."""
        await self._request("DELETE", f"{self.todo_url}/{id}")

    @staticmethod
    def filter_todos(todos: Iterable[Todo], refinement: Refinement) -> list[Todo]:
        """Refine an already fetched list locally. No request is made."""
        return refine_todos(todos, refinement)
