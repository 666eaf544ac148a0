"""Tests for todo_core.identifiers."""

from __future__ import annotations

import pytest

from todo_core.errors import MalformedIdentifier
from todo_core.identifiers import is_object_id, new_object_id, parse_object_id


def test_new_ids_are_legal_and_unique():
    ids = [new_object_id() for _ in range(100)]
    assert all(is_object_id(i) for i in ids)
    assert all(len(i) == 24 for i in ids)
    assert len(set(ids)) == 100


def test_parse_normalises_case():
    assert parse_object_id("65A1B2C3D4E5F60718293A4B") == "65a1b2c3d4e5f60718293a4b"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "chris_id",
        "65a1b2c3d4e5f60718293a4",  # 23 digits
        "65a1b2c3d4e5f60718293a4bc",  # 25 digits
        "65a1b2c3d4e5f60718293a4g",
        "65a1b2c3d4e5f60718293a4b\n",
        None,
        12345,
    ],
)
def test_parse_rejects_illegal(text):
    with pytest.raises(MalformedIdentifier):
        parse_object_id(text)
