"""Three-way comparison result."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

_NAMES = {
    "less": -1,
    "lt": -1,
    "equal": 0,
    "eq": 0,
    "greater": 1,
    "gt": 1,
}


class Ordering(IntEnum):
    """Result of comparing two values.

    The integer values follow the ``cmp`` convention, so an Ordering can be
    returned directly from a function passed to ``functools.cmp_to_key``.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Mirror the ordering (LESS <-> GREATER, EQUAL unchanged)."""
        return Ordering(-self.value)

    @property
    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    @property
    def is_lt(self) -> bool:
        return self is Ordering.LESS

    @property
    def is_gt(self) -> bool:
        return self is Ordering.GREATER

    @classmethod
    def of(cls, x: Any, y: Any) -> Ordering:
        """Compare two values that support ``<`` and ``>``."""
        if x < y:
            return cls.LESS
        if x > y:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def parse(cls, value: Any) -> Ordering:
        """Build an Ordering from an Ordering, an int or a name.

        Accepted names (case-insensitive): less/lt, equal/eq, greater/gt.

        Raises:
            ValueError: If the value does not name an ordering
        """
        if isinstance(value, Ordering):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not an ordering: {value!r}")
        if isinstance(value, int):
            if value not in (-1, 0, 1):
                raise ValueError(f"Ordering must be -1, 0 or 1, got {value}")
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _NAMES:
                return cls(_NAMES[key])
            raise ValueError(f"Unknown ordering name: '{value}'")
        raise ValueError(f"Not an ordering: {value!r}")
