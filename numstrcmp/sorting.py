"""Numeric sorting of text values.

Hosts that sort text records (a line-based ``sort -n`` for instance) pass
the comparator in as a key. Malformed values never abort the sort: they
land at the low end (high end when reversed).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any, TypeVar

import structlog

from numstrcmp.compare import numeric_str_cmp

logger = structlog.get_logger()

T = TypeVar("T")

# Sort key for sorted()/list.sort(), e.g. sorted(values, key=numeric_sort_key)
numeric_sort_key = cmp_to_key(numeric_str_cmp)


def _make_key(key: Callable[[T], str] | None) -> Callable[[Any], Any]:
    if key is None:
        return numeric_sort_key
    return lambda item: numeric_sort_key(key(item))


def sort_numeric(
    values: Iterable[T],
    *,
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Sort values numerically by their text.

    The sort is stable: values comparing equal (e.g. "1,000" and "1000",
    or any two malformed values) keep their input order.

    Args:
        values: Strings, or arbitrary items when key is given
        key: Function extracting the text to compare from each item
        reverse: Sort in descending order

    Returns:
        New sorted list
    """
    items = list(values)
    logger.debug("numeric_sort", count=len(items), reverse=reverse)
    return sorted(items, key=_make_key(key), reverse=reverse)


def max_numeric(values: Iterable[T], *, key: Callable[[T], str] | None = None) -> T:
    """Return the numerically largest value (the first one on ties).

    Raises:
        ValueError: If values is empty
    """
    return max(values, key=_make_key(key))


def min_numeric(values: Iterable[T], *, key: Callable[[T], str] | None = None) -> T:
    """Return the numerically smallest value (the first one on ties).

    Raises:
        ValueError: If values is empty
    """
    return min(values, key=_make_key(key))
