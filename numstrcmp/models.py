"""Pydantic models for comparison fixtures.

Fixture files are JSON documents of the form:

    {
      "cases": [
        {"name": "minus_zero", "a": "-0", "b": "0", "expected": "less"}
      ]
    }

``expected`` accepts a name (less/equal/greater, lt/eq/gt) or -1/0/1.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from numstrcmp.compare import numeric_str_cmp
from numstrcmp.ordering import Ordering

# Ordering parsed from a name or an int
OrderingField = Annotated[
    Ordering,
    BeforeValidator(Ordering.parse),
    Field(description="Expected ordering of a relative to b"),
]


class ComparisonCase(BaseModel):
    """A pair of operands and the ordering they are expected to compare to."""

    name: str
    a: str
    b: str
    expected: OrderingField
    description: str | None = None

    def check(self) -> tuple[Ordering, bool]:
        """Run the comparator on this case.

        Returns:
            Tuple of (actual ordering, whether it matches expected)
        """
        actual = numeric_str_cmp(self.a, self.b)
        return actual, actual == self.expected

    def mirrored(self) -> ComparisonCase:
        """The same case with operands swapped and the expectation reversed."""
        return ComparisonCase(
            name=f"{self.name}_mirrored",
            a=self.b,
            b=self.a,
            expected=self.expected.reverse(),
            description=self.description,
        )


class ComparisonSuite(BaseModel):
    """A named collection of comparison cases."""

    cases: list[ComparisonCase] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> ComparisonSuite:
        """Load a suite from a JSON file.

        Raises:
            pydantic.ValidationError: If the file does not describe a suite
        """
        with open(path) as f:
            data = json.load(f)
        return cls.model_validate(data)

    def failures(self) -> list[tuple[ComparisonCase, Ordering]]:
        """Cases whose comparator result differs from the expectation."""
        failed = []
        for case in self.cases:
            actual, ok = case.check()
            if not ok:
                failed.append((case, actual))
        return failed
