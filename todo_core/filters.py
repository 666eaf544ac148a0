"""Filter predicate builder.

Turns the optional filter keys of a list request into one composable
predicate. Each present key becomes an unanchored, case-insensitive
substring match on that field; the matches are ANDed together.

Usage:
    predicate = build_predicate(TodoFilters(owner="chr", status="true"))
    predicate.matches(todo)       # evaluate in memory
    predicate.clauses             # hand to a store to translate
"""

from __future__ import annotations

from dataclasses import dataclass

from todo_core.types import FILTER_KEYS, Todo, TodoFilters


def field_text(value: object) -> str:
    """Text form of a stored field value, as a document store renders it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class FieldMatch:
    """Case-insensitive substring match of ``value`` within ``field``."""

    field: str
    value: str

    def matches(self, todo: Todo) -> bool:
        target = field_text(getattr(todo, self.field, None))
        return self.value.lower() in target.lower()


@dataclass(frozen=True)
class Predicate:
    """Conjunction of field matches. No clauses matches every record."""

    clauses: tuple[FieldMatch, ...] = ()

    def matches(self, todo: Todo) -> bool:
        return all(clause.matches(todo) for clause in self.clauses)

    def and_(self, other: Predicate) -> Predicate:
        """Combine two predicates; both must hold."""
        return Predicate(self.clauses + other.clauses)

    @property
    def is_empty(self) -> bool:
        return not self.clauses


MATCH_ALL = Predicate()


def build_predicate(filters: TodoFilters) -> Predicate:
    """Build the store predicate for a list request.

    Args:
        filters: Parsed request parameters. Keys left as None impose no
            constraint; an empty string is kept and matches everything.

    Returns:
        A Predicate with one clause per present key, in field order.
    """
    clauses = []
    for key in FILTER_KEYS:
        value = getattr(filters, key)
        if value is not None:
            clauses.append(FieldMatch(field=key, value=value))
    return Predicate(tuple(clauses))
