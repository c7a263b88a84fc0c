"""Standard operand pairs for the comparator benchmark."""

from numstrcmp.models import ComparisonCase
from numstrcmp.ordering import Ordering


def _fractional(digits: str) -> str:
    return "0." + digits


DEFAULT_CASES: list[ComparisonCase] = [
    ComparisonCase(
        name="two_digits",
        a="20",
        b="10",
        expected=Ordering.GREATER,
    ),
    ComparisonCase(
        name="100_digits",
        a="20" * 50,
        b="50" * 50,
        expected=Ordering.LESS,
    ),
    ComparisonCase(
        name="100000_digits",
        a="20" * 50000,
        b="50" * 50000,
        expected=Ordering.LESS,
        description="Both operands overflow float to inf",
    ),
    ComparisonCase(
        name="100_digits_after_decimal_pt",
        a=_fractional("20" * 50),
        b=_fractional("50" * 50),
        expected=Ordering.LESS,
    ),
    ComparisonCase(
        name="100_digits_before_and_after_decimal_pt",
        a="20" * 50 + "." + "20" * 50,
        b="50" * 50 + "." + "50" * 50,
        expected=Ordering.LESS,
    ),
    ComparisonCase(
        name="grouped_thousands",
        a="1,000,000.5",
        b="999,999.75",
        expected=Ordering.GREATER,
        description="Float parsing cannot read grouping characters",
    ),
]
