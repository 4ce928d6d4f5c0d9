"""Identifier generators injected into the compilers."""

from __future__ import annotations

import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_ids() -> IdFactory:
    """Return a factory producing random UUID4 strings."""

    def new_id() -> str:
        return str(uuid.uuid4())

    return new_id


def sequential_ids(prefix: str = "id") -> IdFactory:
    """Return a factory producing ``prefix-1``, ``prefix-2``, ...

    Useful for reproducible output in tests and snapshots.
    """
    counter = itertools.count(1)

    def new_id() -> str:
        return f"{prefix}-{next(counter)}"

    return new_id
