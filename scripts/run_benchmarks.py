#!/usr/bin/env python3
"""CLI script for benchmarking numeric_str_cmp against float parsing.

Usage:
    # Standard cases (two digits up to 100,000 digits)
    python scripts/run_benchmarks.py

    # Cases from a fixture file, fewer iterations, JSON report only
    python scripts/run_benchmarks.py \\
        --cases tests/fixtures/comparisons.json --iterations 100 --format json
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from benchmarks.cases import DEFAULT_CASES  # noqa: E402
from benchmarks.config import BenchmarkConfig  # noqa: E402
from benchmarks.harness import BenchmarkHarness  # noqa: E402
from benchmarks.metrics import compute_metrics  # noqa: E402
from benchmarks.report import save_report  # noqa: E402
from numstrcmp.models import ComparisonSuite  # noqa: E402

logger = structlog.get_logger()


def main() -> int:
    """Main entry point for benchmark runner."""
    parser = argparse.ArgumentParser(
        description="Benchmark numeric_str_cmp against a naive float-parse comparator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment overrides:
  NUMSTRCMP_BENCH_ITERATIONS, NUMSTRCMP_BENCH_WARMUP,
  NUMSTRCMP_BENCH_LARGE_ITERATIONS
        """,
    )

    parser.add_argument(
        "--cases",
        type=Path,
        default=None,
        help="JSON fixture file with comparison cases (default: built-in cases)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Timed calls per comparator per case",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "benchmarks" / "results",
        help="Directory for output reports (default: benchmarks/results)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["markdown", "json", "both", "none"],
        default="both",
        help="Output format (default: both)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if args.cases is not None:
        if not args.cases.exists():
            logger.error("cases_file_not_found", path=str(args.cases))
            print(f"Error: Cases file not found: {args.cases}")
            return 1
        cases = ComparisonSuite.load(args.cases).cases
    else:
        cases = DEFAULT_CASES

    try:
        config = BenchmarkConfig.from_env()
        if args.iterations is not None:
            config = replace(config, iterations=args.iterations)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print("Numeric String Comparison Benchmark")
    print("=" * 60)
    print(f"Cases:      {len(cases)}")
    print(f"Iterations: {config.iterations} (large operands: {config.large_iterations})")
    print()

    summary = BenchmarkHarness(config=config).run(cases)
    metrics = compute_metrics(summary.results)

    print()
    print("=" * 60)
    print("Results Summary")
    print("=" * 60)
    print(f"numeric_str_cmp correct: {metrics.numeric_correct}/{metrics.total_cases}")
    print(f"float parse correct:     {metrics.float_correct}/{metrics.total_cases}")
    print(f"float parse failed:      {metrics.float_failed}")
    print(f"float parse overflowed:  {metrics.float_overflows}")
    print(f"Disagreements:           {metrics.disagreements}")
    print()

    if metrics.time_ratio_stats:
        ts = metrics.time_ratio_stats
        print("Time Comparison (numeric_str_cmp / float parse):")
        print(f"  Mean:   {ts.mean:.2f}x")
        print(f"  Median: {ts.median:.2f}x")
        print(f"  Range:  {ts.min:.2f}x - {ts.max:.2f}x")
        print()

    for label, stats in (
        ("numeric_str_cmp", metrics.numeric_time_stats),
        ("float parse", metrics.float_time_stats),
    ):
        if stats:
            print(f"{label} mean: {stats.mean * 1000:.2f}µs per call")
    print()

    print("Individual Results:")
    print("-" * 60)
    for r in summary.results:
        num_status = "✓" if r.numeric_correct else "✗"
        flt_status = "✓" if r.float_correct else ("!" if r.float_result.error else "✗")
        print(
            f"  {num_status} {flt_status} {r.case_name} "
            f"({r.numeric_result.elapsed_ms * 1000:.2f}µs vs "
            f"{r.float_result.elapsed_ms * 1000:.2f}µs)"
        )
    print()

    if args.format != "none":
        formats = ["markdown", "json"] if args.format == "both" else [args.format]
        paths = save_report(summary, args.output, formats)
        for path in paths:
            print(f"Report saved: {path}")

    return 0 if metrics.numeric_correct == metrics.total_cases else 1


if __name__ == "__main__":
    sys.exit(main())
