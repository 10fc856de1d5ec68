from __future__ import annotations

import uuid

from src.core.ids import generate_id, sequential_ids


def test_generate_id_returns_distinct_uuid4_strings() -> None:
    first, second = generate_id(), generate_id()

    assert first != second
    assert uuid.UUID(first).version == 4


def test_sequential_ids_are_deterministic() -> None:
    next_id = sequential_ids("user")

    assert [next_id(), next_id(), next_id()] == ["user-1", "user-2", "user-3"]


def test_sequential_factories_are_independent() -> None:
    a, b = sequential_ids("a"), sequential_ids("b")

    a()
    assert b() == "b-1"
    assert a() == "a-2"
