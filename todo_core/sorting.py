"""Sort order resolver for list requests."""

from __future__ import annotations

from dataclasses import dataclass

from todo_core.types import OWNER_KEY

DEFAULT_SORT_FIELD = OWNER_KEY
DESCENDING = "desc"


@dataclass(frozen=True)
class SortOrder:
    """A field plus a direction.

    The field is not checked against the record shape; the store decides
    what an unknown field means.
    """

    field: str = DEFAULT_SORT_FIELD
    descending: bool = False

    @property
    def direction(self) -> str:
        return "desc" if self.descending else "asc"


def resolve_sort_order(
    sort_by: str | None = None, sort_order: str | None = None
) -> SortOrder:
    """Resolve optional sort parameters into a SortOrder.

    Args:
        sort_by: Field name. Defaults to the owner field.
        sort_order: Only the exact token "desc" sorts descending.

    Returns:
        The resolved SortOrder.
    """
    return SortOrder(
        field=sort_by if sort_by is not None else DEFAULT_SORT_FIELD,
        descending=sort_order == DESCENDING,
    )
