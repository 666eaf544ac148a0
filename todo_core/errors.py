"""Error kinds raised by the todo core.

Every failure the request boundary needs to tell apart has its own class.
Each carries the HTTP status the REST layer reports for it, so the mapping
lives next to the error rather than in every handler.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for all todo domain errors."""

    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedIdentifier(TodoError):
    """The identifier cannot be parsed into the store's id format."""

    status = 400


class NotFound(TodoError):
    """A well-formed reference to a record that does not exist."""

    status = 404


class ValidationFailed(TodoError):
    """A candidate record violates a field constraint.

    Only the first violated rule is reported.
    """

    status = 400

    def __init__(self, rule: str, message: str) -> None:
        super().__init__(message)
        self.rule = rule


class StoreUnavailable(TodoError):
    """The backing store could not be reached or failed unexpectedly."""

    status = 500
