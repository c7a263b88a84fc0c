"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from numstrcmp.models import ComparisonSuite
from tests.helpers import FIXTURES_DIR, SAMPLE_OPERANDS, load_comparison_suite


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def comparison_suite() -> ComparisonSuite:
    """The standard comparison suite."""
    return load_comparison_suite()


@pytest.fixture
def sample_operands() -> list[str]:
    """Operands for property checks over all pairs."""
    return list(SAMPLE_OPERANDS)
