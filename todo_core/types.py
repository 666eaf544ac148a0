"""Shared data types for the todo core."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# ============================================================
# Field vocabulary
# ============================================================

OWNER_KEY = "owner"
STATUS_KEY = "status"
BODY_KEY = "body"
CATEGORY_KEY = "category"

FILTER_KEYS = (OWNER_KEY, STATUS_KEY, BODY_KEY, CATEGORY_KEY)

SORT_BY_KEY = "sortby"
SORT_ORDER_KEY = "sortorder"

CATEGORIES = ("groceries", "homework", "software design", "video games")

BODY_MIN_LENGTH = 2
BODY_MAX_LENGTH = 300


# ============================================================
# Record
# ============================================================


@dataclass(frozen=True)
class Todo:
    """A single todo item.

    Records are never updated in place. The id is assigned by the store on
    insert and is None on a candidate that has not been persisted yet.
    """

    owner: str
    status: bool
    body: str
    category: str
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Wire form, keyed the way the document collection keys it."""
        return {
            "_id": self.id,
            OWNER_KEY: self.owner,
            STATUS_KEY: self.status,
            BODY_KEY: self.body,
            CATEGORY_KEY: self.category,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Todo:
        """Build a Todo from its wire form. Performs no validation."""
        return cls(
            owner=data.get(OWNER_KEY, ""),
            status=bool(data.get(STATUS_KEY, False)),
            body=data.get(BODY_KEY, ""),
            category=data.get(CATEGORY_KEY, ""),
            id=data.get("_id", data.get("id")),
        )


# ============================================================
# Filter specifications
# ============================================================


@dataclass(frozen=True)
class TodoFilters:
    """Server-side list request: filter keys plus sort parameters.

    Every value is free text as it arrived on the request. ``status`` is
    deliberately text, not boolean; it is matched against the text form of
    the stored value.
    """

    owner: str | None = None
    status: str | None = None
    body: str | None = None
    category: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> TodoFilters:
        """Parse raw query parameters.

        A key that is present with an empty value is kept as an empty
        string, which later matches everything for that field.
        """
        return cls(
            owner=query.get(OWNER_KEY),
            status=query.get(STATUS_KEY),
            body=query.get(BODY_KEY),
            category=query.get(CATEGORY_KEY),
            sort_by=query.get(SORT_BY_KEY),
            sort_order=query.get(SORT_ORDER_KEY),
        )

    def to_query(self) -> dict[str, str]:
        """Inverse of from_query: only the keys that are set."""
        pairs = {
            OWNER_KEY: self.owner,
            STATUS_KEY: self.status,
            BODY_KEY: self.body,
            CATEGORY_KEY: self.category,
            SORT_BY_KEY: self.sort_by,
            SORT_ORDER_KEY: self.sort_order,
        }
        return {k: v for k, v in pairs.items() if v is not None}


@dataclass(frozen=True)
class Refinement:
    """Client-side second pass over an already fetched list."""

    owner: str | None = None
    status: bool | None = None
    body: str | None = None
    category: str | None = None
    limit: int | None = None
    sort_by: str | None = None
