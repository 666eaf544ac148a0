"""Opening the todo database.

The collection lives in a single table, todo_app.todo, created from
schema.sql the first time a database file is opened. The schema name must
differ from the database file's stem: DuckDB names a file's catalog after
its stem, and a catalog and schema sharing a name make every qualified
reference ambiguous.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import duckdb

from todo_core.config import DEFAULT_DB_PATH

MEMORY = ":memory:"
SCHEMA = "todo_app"


def get_db_path() -> str:
    """TODO_DB_PATH if set, else the default file under .todos/."""
    return os.getenv("TODO_DB_PATH", DEFAULT_DB_PATH)


def get_connection(db_path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Open the todo database, creating its directory and table if needed.

    Args:
        db_path: File path or ":memory:". Defaults to get_db_path().

    Returns:
        A connection on which todo_app.todo exists.
    """
    if db_path is None:
        db_path = get_db_path()

    if db_path != MEMORY:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = duckdb.connect(db_path)

    if not _schema_exists(conn):
        init_schema(conn)

    return conn


def _schema_exists(conn: duckdb.DuckDBPyConnection) -> bool:
    """True once the todo table has been created."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables "
        "WHERE table_schema = ? AND table_name = 'todo'",
        [SCHEMA],
    ).fetchone()
    return result is not None and result[0] > 0


def init_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Run schema.sql. Every statement in it is IF NOT EXISTS."""
    schema_path = Path(__file__).parent / "schema.sql"
    conn.execute(schema_path.read_text())


@contextmanager
def connection(
    db_path: str | None = None,
) -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Open the todo database for the duration of a with block.

    Example:
        >>> with connection(":memory:") as conn:
        ...     conn.execute("SELECT COUNT(*) FROM todo_app.todo").fetchone()
        (0,)
    """
    conn = get_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()
