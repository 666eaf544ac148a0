"""Object-id style record identifiers.

Ids are 24 hex digits: 4 bytes of big-endian epoch seconds, 5 random bytes
and a 3-byte rolling counter. They sort roughly by creation time.
"""

from __future__ import annotations

import itertools
import os
import re
import time

from todo_core.errors import MalformedIdentifier

ILLEGAL_ID_MESSAGE = "The requested todo id wasn't a legal Mongo Object ID."

_OBJECT_ID_RE = re.compile(r"[0-9a-fA-F]{24}")
_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_object_id() -> str:
    """Generate a fresh identifier."""
    seconds = int(time.time()) & 0xFFFFFFFF
    count = next(_counter) & 0xFFFFFF
    raw = seconds.to_bytes(4, "big") + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return raw.hex()


def is_object_id(text: object) -> bool:
    """True if text is a legal identifier."""
    return isinstance(text, str) and _OBJECT_ID_RE.fullmatch(text) is not None


def parse_object_id(text: object) -> str:
    """Normalise an identifier, rejecting anything that is not one.

    Args:
        text: Raw identifier, usually a path parameter.

    Returns:
        The identifier in lowercase.

    Raises:
        MalformedIdentifier: If text is not exactly 24 hex digits.
    """
    if not is_object_id(text):
        raise MalformedIdentifier(ILLEGAL_ID_MESSAGE)
    return text.lower()  # type: ignore[union-attr]
