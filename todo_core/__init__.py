"""
Todos: query, filter and sort core for a todo collection.

Backend-agnostic: the store is reached only through the TodoStore protocol.
The server-side path builds a predicate and sort order for the store; the
client-side path refines an already fetched list in memory.
"""

__version__ = "0.1.0"

from todo_core.adapters import TodoStore
from todo_core.errors import (
    MalformedIdentifier,
    NotFound,
    StoreUnavailable,
    TodoError,
    ValidationFailed,
)
from todo_core.filters import FieldMatch, Predicate, build_predicate
from todo_core.lifecycle import TodoLifecycle, validate_todo
from todo_core.queries import TodoQueries
from todo_core.refine import refine_todos
from todo_core.sorting import SortOrder, resolve_sort_order
from todo_core.types import CATEGORIES, Refinement, Todo, TodoFilters

__all__ = [
    # Adapter protocols
    "TodoStore",
    # Types
    "CATEGORIES",
    "Todo",
    "TodoFilters",
    "Refinement",
    # Errors
    "TodoError",
    "MalformedIdentifier",
    "NotFound",
    "ValidationFailed",
    "StoreUnavailable",
    # Query path
    "FieldMatch",
    "Predicate",
    "build_predicate",
    "SortOrder",
    "resolve_sort_order",
    "TodoQueries",
    "refine_todos",
    # Lifecycle
    "TodoLifecycle",
    "validate_todo",
]
