"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Operand samples and the fixtures directory
- factories: Fixture loaders and benchmark result factories
"""

from tests.helpers.constants import (
    FIXTURES_DIR,
    FRACTION_OPERANDS,
    INVALID_OPERANDS,
    LENGTH_OPERANDS,
    SAMPLE_OPERANDS,
    SIGNED_OPERANDS,
)
from tests.helpers.factories import (
    iter_comparison_cases,
    load_comparison_suite,
    make_benchmark_result,
)

__all__ = [
    # Constants
    "FIXTURES_DIR",
    "SAMPLE_OPERANDS",
    "SIGNED_OPERANDS",
    "LENGTH_OPERANDS",
    "FRACTION_OPERANDS",
    "INVALID_OPERANDS",
    # Factories
    "load_comparison_suite",
    "iter_comparison_cases",
    "make_benchmark_result",
]
