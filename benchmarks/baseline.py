"""Naive float-parse comparator used as the benchmark baseline.

Parsing to float is the obvious way to compare numeric strings, but it
loses precision beyond 53 bits and overflows to ``inf`` past ~1.8e308, at
which point distinct values compare equal.
"""

from numstrcmp.ordering import Ordering


def float_parse_cmp(a: str, b: str) -> Ordering:
    """Compare two strings by parsing them to float.

    Raises:
        ValueError: If either string does not parse as a float
    """
    return Ordering.of(float(a), float(b))


def overflows_float(value: str) -> bool:
    """True if the string parses to an infinite float."""
    try:
        parsed = float(value)
    except ValueError:
        return False
    return parsed in (float("inf"), float("-inf"))
