"""Numeric string wrapper with natural comparison operators.

Usage pattern:
    from numstrcmp.numeric_str import N

    prices = [N("1,200.50"), N("-3"), N("99")]
    cheapest = min(prices)      # N('-3')
    assert N("1,000") == "1000"

Values keep their original text: nothing is parsed or canonicalized.
"""

from __future__ import annotations

from numstrcmp.compare import is_valid_numeric_str, numeric_str_cmp
from numstrcmp.ordering import Ordering


class NumericStr:
    """String compared as a number.

    Comparison operators delegate to ``numeric_str_cmp`` and accept either a
    NumericStr or a plain ``str`` on the other side. Text with invalid
    content is smaller than every number and equal to other invalid text.

    NumericStr is unhashable: ``N("1,000") == N("1000")`` although the texts
    differ, and there is no canonical form to hash.

    Attributes:
        text: The wrapped string (read-only)
    """

    __slots__ = ("_text",)
    _text: str

    def __init__(self, text: str | NumericStr) -> None:
        """Create a NumericStr from a string or another NumericStr.

        Raises:
            TypeError: If text is not a str or NumericStr
        """
        if isinstance(text, NumericStr):
            self._text = text._text
        elif isinstance(text, str):
            self._text = text
        else:
            raise TypeError(f"NumericStr requires str, got {type(text).__name__}")

    @property
    def text(self) -> str:
        """The wrapped string."""
        return self._text

    @property
    def is_valid(self) -> bool:
        """True if the text holds no invalid content."""
        return is_valid_numeric_str(self._text)

    def __repr__(self) -> str:
        return f"NumericStr({self._text!r})"

    def __str__(self) -> str:
        return self._text

    __hash__ = None  # type: ignore[assignment]

    def compare(self, other: NumericStr | str) -> Ordering:
        """Three-way numeric comparison with another value."""
        return numeric_str_cmp(self._text, _extract_text(other))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (NumericStr, str)):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: NumericStr | str) -> bool:
        if not isinstance(other, (NumericStr, str)):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: NumericStr | str) -> bool:
        if not isinstance(other, (NumericStr, str)):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: NumericStr | str) -> bool:
        if not isinstance(other, (NumericStr, str)):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: NumericStr | str) -> bool:
        if not isinstance(other, (NumericStr, str)):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS


def _extract_text(x: NumericStr | str) -> str:
    """Extract the text from NumericStr or str."""
    if isinstance(x, NumericStr):
        return x._text
    return x


# Convenience alias for concise code
N = NumericStr
