"""Report generation for benchmark results."""

import json
from datetime import datetime
from pathlib import Path

from benchmarks.harness import BenchmarkResult, BenchmarkSummary, ComparatorResult
from benchmarks.metrics import BenchmarkMetrics, compute_metrics


def _ordering_label(result: ComparatorResult) -> str:
    if result.error is not None:
        return "error"
    if result.ordering is None:
        return "N/A"
    return result.ordering.name.lower()


def format_markdown_report(
    summary: BenchmarkSummary, metrics: BenchmarkMetrics | None = None
) -> str:
    """Generate a markdown report from benchmark results."""
    if metrics is None:
        metrics = compute_metrics(summary.results)

    lines = [
        "# Benchmark Report",
        "",
        f"**Date:** {datetime.now().isoformat()}",
        f"**Total Cases:** {summary.total_cases}",
        "",
        "## Summary",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        f"| numeric_str_cmp correct | {metrics.numeric_correct} |",
        f"| float parse correct | {metrics.float_correct} |",
        f"| float parse failed | {metrics.float_failed} |",
        f"| float parse overflowed | {metrics.float_overflows} |",
        f"| Disagreements | {metrics.disagreements} |",
        "",
    ]

    if metrics.time_ratio_stats:
        ts = metrics.time_ratio_stats
        lines.extend([
            "## Time Comparison (numeric_str_cmp / float parse)",
            "",
            "| Statistic | Value |",
            "|-----------|-------|",
            f"| Mean | {ts.mean:.2f}x |",
            f"| Median | {ts.median:.2f}x |",
            f"| Min | {ts.min:.2f}x |",
            f"| Max | {ts.max:.2f}x |",
            f"| Std Dev | {ts.stdev:.2f}x |" if ts.stdev else "",
            "",
            f"numeric_str_cmp was faster in {metrics.numeric_faster_count}/{ts.count} cases "
            f"({100*metrics.numeric_faster_count/ts.count:.1f}%)",
            "",
        ])

    timing = [
        ("numeric_str_cmp", metrics.numeric_time_stats),
        ("float parse", metrics.float_time_stats),
    ]
    if any(stats for _, stats in timing):
        lines.extend([
            "## Per-Comparator Time (µs per call)",
            "",
            "| Comparator | Mean | Median | Min | Max |",
            "|------------|------|--------|-----|-----|",
        ])
        for name, stats in timing:
            if stats:
                lines.append(
                    f"| {name} | {stats.mean * 1000:.2f} | {stats.median * 1000:.2f} | "
                    f"{stats.min * 1000:.2f} | {stats.max * 1000:.2f} |"
                )
        lines.append("")

    if summary.results:
        lines.extend([
            "## Individual Results",
            "",
            "| Case | Length | Expected | numeric_str_cmp | float parse | "
            "numeric (µs) | float (µs) | Time Ratio |",
            "|------|--------|----------|-----------------|-------------|"
            "--------------|------------|------------|",
        ])

        for r in summary.results:
            time_ratio = f"{r.time_ratio:.2f}x" if r.time_ratio else "N/A"
            float_label = _ordering_label(r.float_result)
            if r.float_overflow:
                float_label += " (inf)"
            lines.append(
                f"| {r.case_name} | {r.operand_length} | {r.case.expected.name.lower()} | "
                f"{_ordering_label(r.numeric_result)} | {float_label} | "
                f"{r.numeric_result.elapsed_ms * 1000:.2f} | "
                f"{r.float_result.elapsed_ms * 1000:.2f} | {time_ratio} |"
            )

    return "\n".join(lines)


def format_json_report(summary: BenchmarkSummary, metrics: BenchmarkMetrics | None = None) -> str:
    """Generate a JSON report from benchmark results."""
    if metrics is None:
        metrics = compute_metrics(summary.results)

    def comparator_to_dict(c: ComparatorResult) -> dict:
        return {
            "ordering": c.ordering.name.lower() if c.ordering is not None else None,
            "elapsed_ms": c.elapsed_ms,
            "iterations": c.iterations,
            "error": c.error,
        }

    def result_to_dict(r: BenchmarkResult) -> dict:
        return {
            "case_name": r.case_name,
            "operand_length": r.operand_length,
            "expected": r.case.expected.name.lower(),
            "numeric_str_cmp": comparator_to_dict(r.numeric_result),
            "float_parse": comparator_to_dict(r.float_result),
            "numeric_correct": r.numeric_correct,
            "float_correct": r.float_correct,
            "float_overflow": r.float_overflow,
            "time_ratio": r.time_ratio,
        }

    report = {
        "timestamp": datetime.now().isoformat(),
        "summary": {
            "total_cases": summary.total_cases,
            "numeric_correct": summary.numeric_correct_count,
            "float_correct": summary.float_correct_count,
            "avg_time_ratio": summary.avg_time_ratio,
        },
        "metrics": {
            "float_failed": metrics.float_failed,
            "disagreements": metrics.disagreements,
            "float_overflows": metrics.float_overflows,
            "numeric_faster_count": metrics.numeric_faster_count,
        },
        "results": [result_to_dict(r) for r in summary.results],
    }

    return json.dumps(report, indent=2)


def save_report(
    summary: BenchmarkSummary,
    output_dir: Path,
    formats: list[str] | None = None,
) -> list[Path]:
    """Save benchmark report to files.

    Args:
        summary: Benchmark summary to report
        output_dir: Directory to save reports
        formats: List of formats ("markdown", "json"). Defaults to both.

    Returns:
        List of paths to saved report files
    """
    if formats is None:
        formats = ["markdown", "json"]

    output_dir.mkdir(parents=True, exist_ok=True)
    metrics = compute_metrics(summary.results)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    paths: list[Path] = []

    if "markdown" in formats:
        md_path = output_dir / f"benchmark_{timestamp}.md"
        md_path.write_text(format_markdown_report(summary, metrics))
        paths.append(md_path)

    if "json" in formats:
        json_path = output_dir / f"benchmark_{timestamp}.json"
        json_path.write_text(format_json_report(summary, metrics))
        paths.append(json_path)

    return paths
