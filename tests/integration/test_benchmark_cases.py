"""Run the standard benchmark cases end to end with minimal timing."""

import pytest

from benchmarks.cases import DEFAULT_CASES
from benchmarks.config import BenchmarkConfig
from benchmarks.harness import run_benchmarks
from benchmarks.metrics import compute_metrics
from benchmarks.report import format_json_report, format_markdown_report

FAST_CONFIG = BenchmarkConfig(iterations=2, warmup=0, large_iterations=1)


@pytest.fixture(scope="module")
def summary():
    return run_benchmarks(config=FAST_CONFIG)


def test_default_cases_expectations():
    """Every standard case states the correct ordering."""
    for case in DEFAULT_CASES:
        actual, ok = case.check()
        assert ok, case.name


def test_numeric_always_correct(summary):
    assert summary.total_cases == len(DEFAULT_CASES)
    assert summary.numeric_correct_count == summary.total_cases


def test_float_wrong_beyond_range(summary):
    """Float parsing reports EQUAL for the 100,000 digit operands."""
    by_name = {r.case_name: r for r in summary.results}
    huge = by_name["100000_digits"]
    assert huge.float_result.error is None
    assert not huge.float_correct
    assert huge.numeric_correct
    assert huge.float_overflow


def test_float_fails_on_grouping(summary):
    by_name = {r.case_name: r for r in summary.results}
    assert by_name["grouped_thousands"].float_result.error is not None


def test_metrics(summary):
    metrics = compute_metrics(summary.results)
    assert metrics.numeric_correct == len(DEFAULT_CASES)
    assert metrics.float_correct == len(DEFAULT_CASES) - 2
    assert metrics.float_failed == 1
    assert metrics.disagreements == 1
    assert metrics.float_overflows == 1


def test_reports_render(summary):
    assert "100000_digits" in format_markdown_report(summary)
    assert "100000_digits" in format_json_report(summary)
    assert "| equal (inf) |" in format_markdown_report(summary)
