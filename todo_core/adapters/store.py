"""Storage adapter protocol.

Implemented by: todo_api.store.DuckDBTodoStore (reference), or any backend
that can do substring matching and single-field sorts.

Responsible for persisting and retrieving todo records. The adapter maps
predicates and sort orders to its backend's query mechanism. The caller
never sees SQL, table names, or connection details.

Design:
    store.get("65a1...")                       -> Todo | None
    store.find(predicate, order)               -> list[Todo]
    store.insert(todo)                         -> "65a1..."
    store.delete("65a1...")                    -> True | False
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from todo_core.filters import Predicate
from todo_core.sorting import SortOrder
from todo_core.types import Todo


@runtime_checkable
class TodoStore(Protocol):
    """Persists and retrieves todo records.

    Principles:
    - Every method is a single atomic store call. No locking, no transactions.
    - No timeouts or retries; callers that need bounded latency add their own.
    - Infrastructure failures raise StoreUnavailable.
    """

    def get(self, id: str) -> Todo | None:
        """Retrieve a single record by its normalised id.

        Returns:
            The record, or None if no record has that id.
        """
        ...

    def find(self, predicate: Predicate, order: SortOrder) -> list[Todo]:
        """Return every record matching predicate, in the given order.

        Args:
            predicate: Conjunction of case-insensitive substring matches.
            order: Sort field and direction. Ties fall back to insertion
                order. A field the backend does not know leaves only the
                insertion order.

        Returns:
            Fully materialised list. Empty list if none match.
        """
        ...

    def insert(self, todo: Todo) -> str:
        """Persist a validated record under a freshly assigned id.

        Any id already on the record is ignored.

        Returns:
            The new id.
        """
        ...

    def delete(self, id: str) -> bool:
        """Physically remove one record.

        Returns:
            True if a record was removed, False if none had that id.
        """
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...
