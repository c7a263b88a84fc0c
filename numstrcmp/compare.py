"""Numeric comparison of strings without parsing them to float.

Comparing the text directly allows numbers of arbitrary length and avoids
precision loss at the float range boundary: ``"20" * 50000`` and
``"50" * 50000`` both parse to ``inf`` but still compare correctly here.

Accepted syntax:
- at most one leading ``-`` or ``+``
- ASCII digits
- ``,`` as a grouping character, skipped wherever it occurs
- at most one ``.`` decimal point

Anything else (including a second decimal point) is invalid content. A
string holding invalid content is smaller than every valid number. Two
invalid strings are equal unless their signs differ, in which case the
negative one is smaller. ``numeric_str_cmp`` never raises.

Integer-part magnitude is inferred from which digit stream reaches the
decimal point (or its end) later, so non-significant leading zeros are not
ignored: ``"010"`` is treated as a three-digit integer part.

Once both integer parts are known to have the same length, their first
differing digit decides before trailing fractional zeros are considered:
``"20.00000" > "10.0"`` and ``"20" == "20.0"``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from numstrcmp.constants import (
    DECIMAL_PT,
    MINUS_SIGN,
    NEGATIVE,
    NON_NEGATIVE,
    PLUS_SIGN,
    THOUSANDS_SEPARATOR,
)
from numstrcmp.ordering import Ordering

__all__ = [
    "numeric_str_cmp",
    "parse_sign",
    "contains_invalid_chars",
    "is_valid_numeric_str",
]


def parse_sign(value: str) -> tuple[str, int]:
    """Strip at most one leading sign.

    Returns:
        Tuple of (digit stream, sign) where sign is NEGATIVE or NON_NEGATIVE
    """
    if value.startswith(MINUS_SIGN):
        return value[1:], NEGATIVE
    if value.startswith(PLUS_SIGN):
        return value[1:], NON_NEGATIVE
    return value, NON_NEGATIVE


def _digit_stream(value: str) -> Iterator[str]:
    return (c for c in value if c != THOUSANDS_SEPARATOR)


@dataclass
class _Side:
    """Cursor over one operand's digit stream."""

    chars: Iterator[str]
    had_decimal_pt: bool = False
    contains_invalid: bool = False

    def is_invalid(self, c: str) -> bool:
        # The first decimal point is valid and fixes the integer/fraction boundary
        if c == DECIMAL_PT:
            if self.had_decimal_pt:
                return True
            self.had_decimal_pt = True
            return False
        return not ("0" <= c <= "9") and c != THOUSANDS_SEPARATOR

    def next(self) -> str | None:
        c = next(self.chars, None)
        if c is not None and self.is_invalid(c):
            self.contains_invalid = True
        return c

    def scan_rest(self) -> bool:
        """Consume the remainder, returning True if any invalid content was seen."""
        if not self.contains_invalid:
            self.contains_invalid = any(self.is_invalid(c) for c in self.chars)
        return self.contains_invalid

    def only_zeros_remain(self) -> bool:
        """Consume the remainder while it is all ``0``.

        Stops at the first other character; invalid content found on the way
        is recorded on the side.
        """
        for c in self.chars:
            if self.is_invalid(c):
                self.contains_invalid = True
                return False
            if c != "0":
                return False
        return True


@dataclass
class _WalkState:
    a: _Side
    b: _Side
    both_had_decimal_pt: bool = False
    # First digit difference, used when both streams end together
    ordering_if_same_len: Ordering = Ordering.EQUAL

    def step(self) -> Ordering | None:
        """Advance both sides by one character.

        Returns the magnitude ordering once it is decided, None to continue.
        """
        c_a = self.a.next()
        c_b = self.b.next()

        if c_a is None and c_b is None:
            return self.ordering_if_same_len
        if c_a == DECIMAL_PT and c_b == DECIMAL_PT:
            self.both_had_decimal_pt = True
            return None
        if c_a is not None and c_b == DECIMAL_PT:
            return Ordering.GREATER
        if c_a == DECIMAL_PT and c_b is not None:
            return Ordering.LESS
        if c_b is None:
            return self._longer_side(c_a, self.a, Ordering.GREATER)
        if c_a is None:
            return self._longer_side(c_b, self.b, Ordering.LESS)

        if self.ordering_if_same_len is Ordering.EQUAL:
            self.ordering_if_same_len = Ordering.of(c_a, c_b)
            # Both sides are aligned on the decimal point, so this digit decides
            if self.both_had_decimal_pt and self.ordering_if_same_len is not Ordering.EQUAL:
                return self.ordering_if_same_len
        return None

    def _longer_side(self, c: str | None, side: _Side, ordering: Ordering) -> Ordering:
        """The other side is exhausted while ``side`` still produced ``c``."""
        if c == DECIMAL_PT or self.both_had_decimal_pt:
            # Integer parts have the same length, so their first differing digit decides
            if self.ordering_if_same_len is not Ordering.EQUAL:
                return self.ordering_if_same_len
            # Trailing fractional zeros do not change the value
            if c in ("0", DECIMAL_PT) and side.only_zeros_remain():
                return Ordering.EQUAL
        return ordering


def _ordering_from_invalid_chars(
    a_contains_invalid: bool,
    b_contains_invalid: bool,
) -> Ordering | None:
    """Strings with invalid content are treated as -infinity."""
    if a_contains_invalid and b_contains_invalid:
        return Ordering.EQUAL
    if a_contains_invalid:
        return Ordering.LESS
    if b_contains_invalid:
        return Ordering.GREATER
    return None


def numeric_str_cmp(a: str, b: str) -> Ordering:
    """Compare two strings as numbers without parsing them.

    Args:
        a: Left operand, any text
        b: Right operand, any text

    Returns:
        Ordering of a relative to b
    """
    a, sign_a = parse_sign(a)
    b, sign_b = parse_sign(b)

    if sign_a != sign_b:
        a_invalid = _Side(iter(a)).scan_rest()
        b_invalid = _Side(iter(b)).scan_rest()
        # Only a lone invalid operand overrides the sign
        if a_invalid != b_invalid:
            return Ordering.LESS if a_invalid else Ordering.GREATER
        return Ordering.of(sign_a, sign_b)

    state = _WalkState(a=_Side(_digit_stream(a)), b=_Side(_digit_stream(b)))
    ordering = None
    while ordering is None:
        ordering = state.step()

    by_validity = _ordering_from_invalid_chars(state.a.scan_rest(), state.b.scan_rest())
    if by_validity is not None:
        return by_validity

    if sign_a == NEGATIVE:
        return ordering.reverse()
    return ordering


def contains_invalid_chars(value: str) -> bool:
    """Check whether a string holds content that is not part of a number.

    The leading sign is ignored. An empty string or a lone sign holds no
    invalid content.
    """
    digits, _ = parse_sign(value)
    return _Side(iter(digits)).scan_rest()


def is_valid_numeric_str(value: str) -> bool:
    """Check whether a string sorts as a number rather than as invalid content."""
    return not contains_invalid_chars(value)
