"""DuckDB implementation of the TodoStore protocol.

Predicates become ILIKE clauses over the text form of each column, so a
boolean status is matched as "true"/"false". Sorting falls back to
insertion order (todo_seq) for ties and for fields the table does not
have, the way a document store treats a sort on a missing field.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import duckdb

from todo_api.db import SCHEMA
from todo_core.errors import StoreUnavailable
from todo_core.filters import Predicate
from todo_core.identifiers import new_object_id
from todo_core.sorting import SortOrder
from todo_core.types import Todo

logger = logging.getLogger(__name__)

TABLE = f"{SCHEMA}.todo"

_COLUMNS = "todo_id, owner, status, body, category"

# Record field -> column. Only these can appear in generated SQL.
FIELD_COLUMNS = {
    "_id": "todo_id",
    "owner": "owner",
    "status": "status",
    "body": "body",
    "category": "category",
}


def _like_pattern(value: str) -> str:
    """Unanchored LIKE pattern matching value literally."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def where_clause(predicate: Predicate) -> tuple[str, list[Any]]:
    """Render a predicate as a SQL WHERE fragment and its parameters.

    Returns:
        ("", []) for the empty predicate, otherwise ("WHERE ...", params).
    """
    parts = []
    params: list[Any] = []
    for clause in predicate.clauses:
        column = FIELD_COLUMNS.get(clause.field)
        if column is None:
            raise ValueError(f"Cannot filter on unknown field: {clause.field}")
        parts.append(f"CAST({column} AS VARCHAR) ILIKE ? ESCAPE '\\'")
        params.append(_like_pattern(clause.value))
    if not parts:
        return "", []
    return "WHERE " + " AND ".join(parts), params


def order_clause(order: SortOrder) -> str:
    """Render a sort order; unknown fields sort by insertion order only."""
    column = FIELD_COLUMNS.get(order.field)
    if column is None:
        return "ORDER BY todo_seq ASC"
    return f"ORDER BY {column} {order.direction.upper()}, todo_seq ASC"


def _row_to_todo(row: tuple) -> Todo:
    todo_id, owner, status, body, category = row
    return Todo(owner=owner, status=bool(status), body=body, category=category, id=todo_id)


class DuckDBTodoStore:
    """TodoStore backed by a DuckDB connection.

    Every operation runs on its own cursor so concurrent callers do not
    share statement state.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    @contextmanager
    def _cursor(self) -> Generator[duckdb.DuckDBPyConnection, None, None]:
        try:
            cur = self._conn.cursor()
        except duckdb.Error as e:
            logger.error("Todo store connection failed", exc_info=True)
            raise StoreUnavailable("The todo store is unavailable") from e
        try:
            yield cur
        except duckdb.Error as e:
            logger.error("Todo store operation failed", exc_info=True)
            raise StoreUnavailable("The todo store is unavailable") from e
        finally:
            cur.close()

    def get(self, id: str) -> Todo | None:
        with self._cursor() as cur:
            row = cur.execute(
                f"SELECT {_COLUMNS} FROM {TABLE} WHERE todo_id = ?", [id]
            ).fetchone()
        return _row_to_todo(row) if row else None

    def find(self, predicate: Predicate, order: SortOrder) -> list[Todo]:
        where, params = where_clause(predicate)
        sql = f"SELECT {_COLUMNS} FROM {TABLE} {where} {order_clause(order)}"
        with self._cursor() as cur:
            rows = cur.execute(sql, params).fetchall()
        return [_row_to_todo(row) for row in rows]

    def insert(self, todo: Todo) -> str:
        new_id = new_object_id()
        with self._cursor() as cur:
            cur.execute(
                f"INSERT INTO {TABLE} (todo_id, owner, status, body, category) "
                "VALUES (?, ?, ?, ?, ?)",
                [new_id, todo.owner, todo.status, todo.body, todo.category],
            )
        return new_id

    def delete(self, id: str) -> bool:
        with self._cursor() as cur:
            rows = cur.execute(
                f"DELETE FROM {TABLE} WHERE todo_id = ? RETURNING todo_id", [id]
            ).fetchall()
        return len(rows) == 1

    def count(self) -> int:
        with self._cursor() as cur:
            result = cur.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()
        return int(result[0]) if result else 0
