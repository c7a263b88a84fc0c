"""Benchmark harness comparing numeric_str_cmp with float parsing."""

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import structlog

from benchmarks.baseline import float_parse_cmp, overflows_float
from benchmarks.cases import DEFAULT_CASES
from benchmarks.config import DEFAULT_BENCHMARK_CONFIG, BenchmarkConfig
from numstrcmp.compare import numeric_str_cmp
from numstrcmp.models import ComparisonCase
from numstrcmp.ordering import Ordering

logger = structlog.get_logger()

Comparator = Callable[[str, str], Ordering]


@dataclass
class ComparatorResult:
    """Result from timing one comparator on a case."""

    comparator_name: str
    ordering: Ordering | None
    elapsed_ms: float  # Mean per call
    iterations: int
    error: str | None = None


@dataclass
class BenchmarkResult:
    """Comparison result for a single case."""

    case: ComparisonCase
    numeric_result: ComparatorResult
    float_result: ComparatorResult

    @property
    def case_name(self) -> str:
        return self.case.name

    @property
    def operand_length(self) -> int:
        return max(len(self.case.a), len(self.case.b))

    @property
    def numeric_correct(self) -> bool:
        return self.numeric_result.ordering == self.case.expected

    @property
    def float_correct(self) -> bool:
        return self.float_result.error is None and self.float_result.ordering == self.case.expected

    @property
    def float_overflow(self) -> bool:
        """True if an operand is out of float range, so float parsing sees inf."""
        return overflows_float(self.case.a) or overflows_float(self.case.b)

    @property
    def agree(self) -> bool:
        """True if both comparators produced the same ordering."""
        return (
            self.float_result.error is None
            and self.numeric_result.ordering == self.float_result.ordering
        )

    @property
    def time_ratio(self) -> float | None:
        """Numeric time / float time. >1 means numeric_str_cmp is slower."""
        if self.float_result.error is not None or self.float_result.elapsed_ms == 0:
            return None
        return self.numeric_result.elapsed_ms / self.float_result.elapsed_ms


@dataclass
class BenchmarkSummary:
    """Summary across all benchmarked cases."""

    total_cases: int
    results: list[BenchmarkResult] = field(default_factory=list)

    @property
    def numeric_correct_count(self) -> int:
        return sum(1 for r in self.results if r.numeric_correct)

    @property
    def float_correct_count(self) -> int:
        return sum(1 for r in self.results if r.float_correct)

    @property
    def avg_time_ratio(self) -> float | None:
        """Average time ratio across cases where float parsing succeeded."""
        ratios = [r.time_ratio for r in self.results if r.time_ratio is not None]
        if not ratios:
            return None
        return sum(ratios) / len(ratios)


class ComparatorRunner:
    """Times a comparator on benchmark cases."""

    def __init__(self, name: str, comparator: Comparator, config: BenchmarkConfig):
        self.name = name
        self.comparator = comparator
        self.config = config

    def run(self, case: ComparisonCase) -> ComparatorResult:
        """Run the comparator repeatedly on a case and report mean time per call."""
        iterations = self.config.iterations_for(case.a, case.b)
        comparator = self.comparator
        a, b = case.a, case.b

        try:
            for _ in range(self.config.warmup):
                comparator(a, b)

            start = time.perf_counter()
            for _ in range(iterations):
                ordering = comparator(a, b)
            elapsed_ms = (time.perf_counter() - start) * 1000 / iterations
        except Exception as e:
            logger.exception("comparator_error", comparator=self.name, case=case.name)
            return ComparatorResult(
                comparator_name=self.name,
                ordering=None,
                elapsed_ms=0.0,
                iterations=0,
                error=str(e),
            )

        return ComparatorResult(
            comparator_name=self.name,
            ordering=ordering,
            elapsed_ms=elapsed_ms,
            iterations=iterations,
        )


class BenchmarkHarness:
    """Harness running numeric_str_cmp and the float baseline side by side."""

    def __init__(
        self,
        config: BenchmarkConfig = DEFAULT_BENCHMARK_CONFIG,
        numeric_comparator: Comparator = numeric_str_cmp,
        float_comparator: Comparator = float_parse_cmp,
    ):
        self.config = config
        self.numeric_runner = ComparatorRunner("numeric_str_cmp", numeric_comparator, config)
        self.float_runner = ComparatorRunner("float_parse", float_comparator, config)

    def benchmark_case(self, case: ComparisonCase) -> BenchmarkResult:
        """Run both comparators on a case."""
        logger.info(
            "benchmarking_case",
            name=case.name,
            operand_length=max(len(case.a), len(case.b)),
        )
        result = BenchmarkResult(
            case=case,
            numeric_result=self.numeric_runner.run(case),
            float_result=self.float_runner.run(case),
        )
        if not result.numeric_correct:
            logger.warning(
                "numeric_result_mismatch",
                name=case.name,
                expected=case.expected.name,
                actual=result.numeric_result.ordering,
            )
        return result

    def run(self, cases: Iterable[ComparisonCase]) -> BenchmarkSummary:
        """Benchmark all cases."""
        cases = list(cases)
        logger.info("benchmark_start", count=len(cases))
        results = [self.benchmark_case(case) for case in cases]
        return BenchmarkSummary(total_cases=len(cases), results=results)


def run_benchmarks(
    cases: Iterable[ComparisonCase] | None = None,
    config: BenchmarkConfig | None = None,
) -> BenchmarkSummary:
    """Run the comparator benchmark.

    Args:
        cases: Cases to benchmark (default: DEFAULT_CASES)
        config: Timing configuration (default: environment-adjusted defaults)

    Returns:
        BenchmarkSummary with results
    """
    harness = BenchmarkHarness(config=config or BenchmarkConfig.from_env())
    return harness.run(DEFAULT_CASES if cases is None else cases)


if __name__ == "__main__":
    summary = run_benchmarks()
    print(f"Benchmarked {len(summary.results)} cases")
    print(f"numeric_str_cmp correct: {summary.numeric_correct_count}/{summary.total_cases}")
    print(f"float parse correct:     {summary.float_correct_count}/{summary.total_cases}")
    if summary.avg_time_ratio:
        print(f"Average time ratio (numeric/float): {summary.avg_time_ratio:.2f}x")
