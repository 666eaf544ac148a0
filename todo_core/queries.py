"""Store query executor: the read path over TodoStore.

Composes the predicate builder and sort resolver into a single store call
and hands back typed records, never raw rows.

Usage:
    queries = TodoQueries(store)
    todos = queries.list_todos(TodoFilters(category="home", sort_by="body"))
"""

from __future__ import annotations

import logging

from todo_core.adapters.store import TodoStore
from todo_core.filters import Predicate, build_predicate
from todo_core.sorting import SortOrder, resolve_sort_order
from todo_core.types import Todo, TodoFilters

logger = logging.getLogger(__name__)


class TodoQueries:
    """List query layer over the todo store.

    One list request is one store call: a point-in-time read. Store
    failures (StoreUnavailable) propagate unchanged and are not retried.
    """

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def run(self, predicate: Predicate, order: SortOrder) -> list[Todo]:
        """Execute a pre-built predicate and order."""
        todos = self._store.find(predicate, order)
        logger.debug(
            f"Query with {len(predicate.clauses)} clause(s) "
            f"sorted by {order.field} {order.direction}: {len(todos)} todo(s)"
        )
        return list(todos)

    def list_todos(self, filters: TodoFilters | None = None) -> list[Todo]:
        """All todos matching the request filters, in the requested order."""
        filters = filters or TodoFilters()
        predicate = build_predicate(filters)
        order = resolve_sort_order(filters.sort_by, filters.sort_order)
        return self.run(predicate, order)
