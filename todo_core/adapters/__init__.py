"""Adapter protocol interfaces for the todo core.

    todo_api.store.DuckDBTodoStore → TodoStore

Protocols use structural subtyping (PEP 544): adapters implement the
interface without inheriting from it.
"""

from todo_core.adapters.store import TodoStore

__all__ = [
    "TodoStore",
]
