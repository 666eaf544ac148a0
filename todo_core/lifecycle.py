"""Record lifecycle operations: lookup, insert, delete.

These bypass the query path entirely. Each one is at most a single store
call, so no transaction spans more than one operation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from todo_core.adapters.store import TodoStore
from todo_core.errors import MalformedIdentifier, NotFound, ValidationFailed
from todo_core.identifiers import parse_object_id
from todo_core.types import (
    BODY_KEY,
    BODY_MAX_LENGTH,
    BODY_MIN_LENGTH,
    CATEGORIES,
    CATEGORY_KEY,
    OWNER_KEY,
    STATUS_KEY,
    Todo,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The requested todo was not found"

# The add-todo form submits status as one of these words.
STATUS_WORDS = {"complete": True, "incomplete": False}


def _delete_failed_message(id: str) -> str:
    return (
        f"Was unable to delete ID {id}; "
        "perhaps illegal ID or an ID for an item not in the system?"
    )


def _coerce_status(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return STATUS_WORDS.get(value.lower())
    return None


def validate_todo(payload: Mapping[str, Any]) -> Todo:
    """Validate a candidate record, reporting the first failing rule.

    Rules are checked in a fixed order: body non-empty, body length, owner
    non-empty, status present, category legal.

    Args:
        payload: Decoded request body. Any id in it is ignored.

    Returns:
        A Todo with no id, ready to insert.

    Raises:
        ValidationFailed: On the first violated rule.
    """
    body = payload.get(BODY_KEY)
    if not isinstance(body, str) or len(body) == 0:
        raise ValidationFailed(BODY_KEY, "Todo must have a non-empty body")
    if not BODY_MIN_LENGTH <= len(body) <= BODY_MAX_LENGTH:
        raise ValidationFailed(
            BODY_KEY,
            f"Todo body must be between {BODY_MIN_LENGTH} and "
            f"{BODY_MAX_LENGTH} characters",
        )

    owner = payload.get(OWNER_KEY)
    if not isinstance(owner, str) or len(owner) == 0:
        raise ValidationFailed(OWNER_KEY, "Todo must have a non-empty owner")

    status = _coerce_status(payload.get(STATUS_KEY))
    if status is None:
        raise ValidationFailed(STATUS_KEY, "Todo must have a non-empty status")

    category = payload.get(CATEGORY_KEY)
    if category not in CATEGORIES:
        raise ValidationFailed(CATEGORY_KEY, "Todo must have a legal category")

    return Todo(owner=owner, status=status, body=body, category=category)


class TodoLifecycle:
    """Single-record operations over the todo store."""

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def get_todo(self, id: str) -> Todo:
        """Look up one todo.

        Raises:
            MalformedIdentifier: If id is not a legal identifier.
            NotFound: If no todo has that id.
        """
        todo = self._store.get(parse_object_id(id))
        if todo is None:
            raise NotFound(NOT_FOUND_MESSAGE)
        return todo

    def add_todo(self, payload: Mapping[str, Any]) -> str:
        """Validate and insert a new todo, returning its new id.

        Validation failures are raised before the store is touched.
        """
        todo = validate_todo(payload)
        new_id = self._store.insert(todo)
        logger.info(f"Added todo {new_id} for {todo.owner}")
        return new_id

    def delete_todo(self, id: str) -> None:
        """Delete one todo.

        An illegal id cannot name a stored record, so it is reported the
        same way as an absent one.

        Raises:
            NotFound: If nothing was deleted.
        """
        try:
            key = parse_object_id(id)
        except MalformedIdentifier:
            raise NotFound(_delete_failed_message(id)) from None
        if not self._store.delete(key):
            raise NotFound(_delete_failed_message(id))
        logger.info(f"Deleted todo {key}")
