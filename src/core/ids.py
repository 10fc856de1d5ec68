"""Identifier sources handed to the domain by its callers."""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def generate_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


def sequential_ids(prefix: str) -> IdFactory:
    """Build a deterministic factory yielding ``prefix-1``, ``prefix-2``, ..."""
    counter = itertools.count(1)

    def _next_id() -> str:
        return f"{prefix}-{next(counter)}"

    return _next_id
