#!/usr/bin/env python3
"""Seed the todo database with sample todos.

Idempotent: a todo whose (owner, body) pair is already stored is skipped,
so the script is safe to run multiple times.

Usage:
    python scripts/seed_db.py [DB_PATH]
"""

from __future__ import annotations

import logging
import sys

from todo_api.db import connection, get_db_path
from todo_api.store import DuckDBTodoStore
from todo_core.filters import build_predicate
from todo_core.lifecycle import TodoLifecycle
from todo_core.sorting import SortOrder
from todo_core.types import TodoFilters

logger = logging.getLogger(__name__)

SAMPLE_TODOS = [
    {
        "owner": "Blanche",
        "status": False,
        "body": "In sunt ex non tempor cillum commodo amet incididunt anim qui commodo quis.",
        "category": "software design",
    },
    {
        "owner": "Fry",
        "status": False,
        "body": "Ipsum esse est ullamco magna tempor anim laborum non officia deserunt veniam commodo.",
        "category": "video games",
    },
    {
        "owner": "Fry",
        "status": True,
        "body": "Ullamco irure laborum magna dolor non. Anim occaecat adipisicing cillum eu magna in.",
        "category": "homework",
    },
    {
        "owner": "Workman",
        "status": True,
        "body": "Deserunt velit reprehenderit deserunt sunt excepteur sit eu eiusmod in voluptate aute minim mollit.",
        "category": "groceries",
    },
    {
        "owner": "Dawn",
        "status": True,
        "body": "Magna exercitation pariatur in est incididunt duis eiusmod deserunt ullamco.",
        "category": "software design",
    },
    {
        "owner": "Barry",
        "status": False,
        "body": "Nisi sit non non sunt veniam pariatur. Elit reprehenderit aliqua consectetur est dolor.",
        "category": "video games",
    },
    {
        "owner": "Roberta",
        "status": False,
        "body": "Occaecat id cillum laboris ex. Laboris nulla aute veniam nisi aliqua cillum.",
        "category": "groceries",
    },
    {
        "owner": "Chris",
        "status": False,
        "body": "UMM is cool",
        "category": "software design",
    },
    {
        "owner": "Pat",
        "status": True,
        "body": "IBM is not cool",
        "category": "homework",
    },
    {
        "owner": "Jamie",
        "status": False,
        "body": "Frogs, are cool",
        "category": "groceries",
    },
]


def _already_stored(store: DuckDBTodoStore, todo: dict) -> bool:
    """True if a todo with exactly this owner and body is stored."""
    candidates = store.find(
        build_predicate(TodoFilters(owner=todo["owner"], body=todo["body"])),
        SortOrder(),
    )
    return any(
        t.owner == todo["owner"] and t.body == todo["body"] for t in candidates
    )


def seed_todos(store: DuckDBTodoStore) -> int:
    """Insert sample todos that are not already present.

    Args:
        store: Store to insert into.

    Returns:
        Number of todos inserted.
    """
    lifecycle = TodoLifecycle(store)
    inserted = 0
    for todo in SAMPLE_TODOS:
        if _already_stored(store, todo):
            continue
        lifecycle.add_todo(todo)
        inserted += 1
    return inserted


def main() -> None:
    """Seed the database at DB_PATH (or TODO_DB_PATH)."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    db_path = sys.argv[1] if len(sys.argv) > 1 else get_db_path()

    with connection(db_path) as conn:
        store = DuckDBTodoStore(conn)
        inserted = seed_todos(store)
        logger.info(f"Seeded {inserted} todo(s) into {db_path} ({store.count()} total)")


if __name__ == "__main__":
    main()
