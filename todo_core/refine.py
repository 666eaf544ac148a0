"""Client-side refinement of an already fetched todo list.

The expensive substring queries over the whole collection run in the store.
This pass redoes the cheap ones locally every time a control changes, with
no round trip:

1. owner / body / category: case-sensitive substring containment
2. status: exact boolean equality
3. re-sort by owner, category or body, ascending only
4. truncate to ``limit``

Note the differences from the server-side path: substring matches here are
case-sensitive, status is compared as a boolean rather than as text, and
there is no descending sort.
"""

from __future__ import annotations

from collections.abc import Iterable

from todo_core.types import BODY_KEY, CATEGORY_KEY, OWNER_KEY, Refinement, Todo

SORTABLE_FIELDS = (OWNER_KEY, CATEGORY_KEY, BODY_KEY)


def _contains(todos: list[Todo], field: str, needle: str | None) -> list[Todo]:
    if not needle:
        return todos
    return [t for t in todos if needle in getattr(t, field)]


def refine_todos(todos: Iterable[Todo], refinement: Refinement) -> list[Todo]:
    """Filter, sort and truncate a list of todos in memory.

    Args:
        todos: Records previously returned by the server. Not modified.
        refinement: Local criteria. Unset fields impose nothing.

    Returns:
        A new list.
    """
    refined = list(todos)

    refined = _contains(refined, OWNER_KEY, refinement.owner)
    refined = _contains(refined, BODY_KEY, refinement.body)
    refined = _contains(refined, CATEGORY_KEY, refinement.category)

    if refinement.status is not None:
        refined = [t for t in refined if t.status == refinement.status]

    if refinement.sort_by in SORTABLE_FIELDS:
        field = refinement.sort_by
        refined.sort(key=lambda t: getattr(t, field))

    if refinement.limit is not None and refinement.limit > 0:
        refined = refined[: refinement.limit]

    return refined
