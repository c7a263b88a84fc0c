"""Metrics calculation for benchmark comparisons."""

from collections.abc import Sequence
from dataclasses import dataclass
from statistics import mean, median, stdev

from benchmarks.harness import BenchmarkResult


@dataclass
class DistributionStats:
    """Statistical summary of a distribution."""

    count: int
    mean: float
    median: float
    min: float
    max: float
    stdev: float | None  # None if count < 2

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "DistributionStats | None":
        """Compute statistics from a sequence of values."""
        if not values:
            return None

        values = list(values)
        return cls(
            count=len(values),
            mean=mean(values),
            median=median(values),
            min=min(values),
            max=max(values),
            stdev=stdev(values) if len(values) >= 2 else None,
        )


@dataclass
class BenchmarkMetrics:
    """Computed metrics for a benchmark run."""

    total_cases: int
    numeric_correct: int
    float_correct: int
    float_failed: int  # float() raised on an operand
    disagreements: int  # Both ran, different orderings
    float_overflows: int  # An operand parses to inf

    time_ratio_stats: DistributionStats | None
    numeric_time_stats: DistributionStats | None
    float_time_stats: DistributionStats | None

    numeric_faster_count: int


def compute_metrics(results: list[BenchmarkResult]) -> BenchmarkMetrics:
    """Compute detailed metrics from benchmark results."""
    numeric_correct = 0
    float_correct = 0
    float_failed = 0
    disagreements = 0
    float_overflows = 0
    numeric_faster = 0

    time_ratios: list[float] = []
    numeric_times: list[float] = []
    float_times: list[float] = []

    for r in results:
        if r.numeric_correct:
            numeric_correct += 1
        if r.float_correct:
            float_correct += 1
        if r.float_overflow:
            float_overflows += 1

        if r.numeric_result.error is None:
            numeric_times.append(r.numeric_result.elapsed_ms)

        if r.float_result.error is not None:
            float_failed += 1
            continue

        float_times.append(r.float_result.elapsed_ms)
        if not r.agree:
            disagreements += 1

        if r.time_ratio is not None:
            time_ratios.append(r.time_ratio)
            if r.time_ratio < 1.0:
                numeric_faster += 1

    return BenchmarkMetrics(
        total_cases=len(results),
        numeric_correct=numeric_correct,
        float_correct=float_correct,
        float_failed=float_failed,
        disagreements=disagreements,
        float_overflows=float_overflows,
        time_ratio_stats=DistributionStats.from_values(time_ratios),
        numeric_time_stats=DistributionStats.from_values(numeric_times),
        float_time_stats=DistributionStats.from_values(float_times),
        numeric_faster_count=numeric_faster,
    )
