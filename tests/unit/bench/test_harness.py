"""Tests for the comparator benchmark harness."""

import pytest
from structlog.testing import capture_logs

from benchmarks.baseline import float_parse_cmp, overflows_float
from benchmarks.config import BenchmarkConfig
from benchmarks.harness import BenchmarkHarness, BenchmarkSummary, ComparatorRunner
from numstrcmp.models import ComparisonCase
from numstrcmp.ordering import Ordering
from tests.helpers import make_benchmark_result

FAST_CONFIG = BenchmarkConfig(iterations=3, warmup=1, large_iterations=1)


class TestFloatParseBaseline:
    """Tests for the naive float comparator."""

    def test_compares_small_numbers(self):
        assert float_parse_cmp("20", "10") is Ordering.GREATER
        assert float_parse_cmp("-1.5", "2") is Ordering.LESS

    def test_overflow_collapses(self):
        """Values beyond float range compare equal."""
        assert float_parse_cmp("20" * 50000, "50" * 50000) is Ordering.EQUAL

    def test_rejects_grouping(self):
        with pytest.raises(ValueError):
            float_parse_cmp("1,000", "1")

    def test_overflows_float(self):
        assert overflows_float("9" * 400)
        assert overflows_float("-" + "9" * 400)
        assert not overflows_float("1e5")
        assert not overflows_float("abc")


class TestComparatorRunner:
    """Tests for ComparatorRunner."""

    def test_run_records_ordering(self):
        runner = ComparatorRunner("float_parse", float_parse_cmp, FAST_CONFIG)
        case = ComparisonCase(name="two", a="20", b="10", expected=Ordering.GREATER)
        result = runner.run(case)
        assert result.ordering is Ordering.GREATER
        assert result.iterations == 3
        assert result.error is None
        assert result.elapsed_ms >= 0

    def test_large_operands_use_large_iterations(self):
        runner = ComparatorRunner("float_parse", float_parse_cmp, FAST_CONFIG)
        case = ComparisonCase(name="big", a="1" * 20000, b="2", expected=Ordering.GREATER)
        assert runner.run(case).iterations == 1

    def test_exception_recorded(self):
        """A raising comparator is recorded as an error, not propagated."""
        runner = ComparatorRunner("float_parse", float_parse_cmp, FAST_CONFIG)
        case = ComparisonCase(name="grouped", a="1,000", b="1", expected=Ordering.GREATER)
        with capture_logs() as logs:
            result = runner.run(case)
        assert result.ordering is None
        assert result.error is not None
        assert result.iterations == 0
        assert logs[0]["event"] == "comparator_error"
        assert logs[0]["comparator"] == "float_parse"


class TestBenchmarkResult:
    """Tests for BenchmarkResult properties."""

    def test_correctness(self):
        r = make_benchmark_result(Ordering.LESS, Ordering.EQUAL)
        assert r.numeric_correct
        assert not r.float_correct
        assert not r.agree

    def test_agree(self):
        r = make_benchmark_result(Ordering.LESS, Ordering.LESS)
        assert r.agree
        assert r.float_correct

    def test_time_ratio(self):
        r = make_benchmark_result(Ordering.LESS, Ordering.LESS, numeric_ms=1.0, float_ms=4.0)
        assert r.time_ratio == pytest.approx(0.25)

    def test_time_ratio_none_on_float_error(self):
        r = make_benchmark_result(Ordering.LESS, None, float_error="could not convert")
        assert r.time_ratio is None
        assert not r.float_correct
        assert not r.agree

    def test_operand_length(self):
        r = make_benchmark_result(Ordering.LESS, Ordering.LESS)
        assert r.operand_length == 1
        assert r.case_name == "case"

    def test_float_overflow(self):
        """Operands past the float range are flagged on the result."""
        huge = make_benchmark_result(Ordering.LESS, Ordering.EQUAL, a="2" * 400, b="5" * 400)
        assert huge.float_overflow
        assert not make_benchmark_result(Ordering.LESS, Ordering.LESS).float_overflow
        grouped = make_benchmark_result(
            Ordering.GREATER, None, a="1,000", b="999", float_error="could not convert"
        )
        assert not grouped.float_overflow


class TestBenchmarkSummary:
    """Tests for BenchmarkSummary aggregates."""

    def test_counts(self):
        summary = BenchmarkSummary(
            total_cases=3,
            results=[
                make_benchmark_result(Ordering.LESS, Ordering.LESS),
                make_benchmark_result(Ordering.LESS, Ordering.EQUAL),
                make_benchmark_result(Ordering.LESS, None, float_error="boom"),
            ],
        )
        assert summary.numeric_correct_count == 3
        assert summary.float_correct_count == 1

    def test_avg_time_ratio(self):
        summary = BenchmarkSummary(
            total_cases=2,
            results=[
                make_benchmark_result(Ordering.LESS, Ordering.LESS, numeric_ms=1.0, float_ms=2.0),
                make_benchmark_result(Ordering.LESS, Ordering.LESS, numeric_ms=3.0, float_ms=2.0),
            ],
        )
        assert summary.avg_time_ratio == pytest.approx(1.0)

    def test_avg_time_ratio_empty(self):
        assert BenchmarkSummary(total_cases=0).avg_time_ratio is None


class TestBenchmarkHarness:
    """Tests for BenchmarkHarness."""

    def test_benchmark_case(self):
        harness = BenchmarkHarness(config=FAST_CONFIG)
        case = ComparisonCase(name="huge", a="20" * 50000, b="50" * 50000, expected="less")
        result = harness.benchmark_case(case)
        assert result.numeric_correct
        assert result.float_result.ordering is Ordering.EQUAL
        assert not result.float_correct

    def test_mismatch_logged(self):
        """A wrong numeric result is logged as a warning."""

        def always_equal(a: str, b: str) -> Ordering:
            return Ordering.EQUAL

        harness = BenchmarkHarness(config=FAST_CONFIG, numeric_comparator=always_equal)
        case = ComparisonCase(name="two", a="20", b="10", expected="greater")
        with capture_logs() as logs:
            result = harness.benchmark_case(case)
        assert not result.numeric_correct
        events = [log["event"] for log in logs]
        assert "numeric_result_mismatch" in events

    def test_run(self):
        harness = BenchmarkHarness(config=FAST_CONFIG)
        cases = [
            ComparisonCase(name="a", a="1", b="2", expected="less"),
            ComparisonCase(name="b", a="x", b="2", expected="less"),
        ]
        summary = harness.run(iter(cases))
        assert summary.total_cases == 2
        assert [r.case_name for r in summary.results] == ["a", "b"]
        assert summary.results[1].float_result.error is not None
