"""Shared test fixtures for the todo tests.

Provides an in-memory mock store, the canonical sample todos and DuckDB
fixtures.
"""

from __future__ import annotations

import pytest

from todo_api.db import get_connection
from todo_api.store import DuckDBTodoStore
from todo_core.errors import StoreUnavailable
from todo_core.filters import Predicate
from todo_core.identifiers import new_object_id
from todo_core.sorting import SortOrder
from todo_core.types import Todo


class MockStore:
    """Mock TodoStore implementation for testing queries and lifecycle.

    Keeps records in an insertion-ordered dict and evaluates predicates in
    memory. Unknown sort fields leave insertion order untouched.
    """

    def __init__(self) -> None:
        self._todos: dict[str, Todo] = {}
        self.calls: list[str] = []

    def get(self, id: str) -> Todo | None:
        self.calls.append("get")
        return self._todos.get(id)

    def find(self, predicate: Predicate, order: SortOrder) -> list[Todo]:
        self.calls.append("find")
        results = [t for t in self._todos.values() if predicate.matches(t)]
        field = "id" if order.field == "_id" else order.field
        if field in Todo.__dataclass_fields__:
            results = sorted(
                results, key=lambda t: getattr(t, field), reverse=order.descending
            )
        return results

    def insert(self, todo: Todo) -> str:
        self.calls.append("insert")
        new_id = new_object_id()
        self._todos[new_id] = Todo(
            owner=todo.owner,
            status=todo.status,
            body=todo.body,
            category=todo.category,
            id=new_id,
        )
        return new_id

    def delete(self, id: str) -> bool:
        self.calls.append("delete")
        return self._todos.pop(id, None) is not None

    def count(self) -> int:
        return len(self._todos)


class UnavailableStore:
    """A TodoStore whose every call fails as if the backend were down."""

    def _fail(self, *args, **kwargs):
        raise StoreUnavailable("The todo store is unavailable")

    get = find = insert = delete = count = _fail


SAMPLE_TODOS = [
    Todo(owner="Chris", status=False, body="UMM is cool", category="software design"),
    Todo(owner="Pat", status=True, body="IBM is not cool", category="homework"),
    Todo(owner="Jamie", status=False, body="Frogs, are cool", category="groceries"),
]


@pytest.fixture
def sample_todos() -> list[Todo]:
    """The three canonical todos, with fixed ids."""
    return [
        Todo(owner=t.owner, status=t.status, body=t.body, category=t.category, id=i)
        for t, i in zip(SAMPLE_TODOS, ["chris_id", "pat_id", "jamie_id"])
    ]


@pytest.fixture
def unavailable_store() -> UnavailableStore:
    """Provide a store that always raises StoreUnavailable."""
    return UnavailableStore()


@pytest.fixture
def mock_store() -> MockStore:
    """Provide a fresh MockStore instance."""
    return MockStore()


@pytest.fixture
def seeded_store(mock_store) -> MockStore:
    """MockStore holding the sample todos, inserted Chris, Pat, Jamie."""
    for todo in SAMPLE_TODOS:
        mock_store.insert(todo)
    return mock_store


@pytest.fixture
def in_memory_db():
    """In-memory DuckDB connection with the schema initialized."""
    conn = get_connection(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def duckdb_store(in_memory_db) -> DuckDBTodoStore:
    """DuckDBTodoStore over an empty in-memory database."""
    return DuckDBTodoStore(in_memory_db)


@pytest.fixture
def seeded_duckdb_store(duckdb_store) -> DuckDBTodoStore:
    """DuckDBTodoStore holding the sample todos, inserted Chris, Pat, Jamie."""
    for todo in SAMPLE_TODOS:
        duckdb_store.insert(todo)
    return duckdb_store
