"""Benchmark configuration."""

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class BenchmarkConfig:
    """Timing parameters for the comparator benchmark.

    Attributes:
        iterations: Timed calls per comparator per case (default: 1,000)
        warmup: Untimed calls made before timing starts (default: 10)
        large_iterations: Timed calls for cases with operands longer than
            large_threshold characters (default: 10)
        large_threshold: Operand length above which a case counts as large
    """

    iterations: int = 1000
    warmup: int = 10
    large_iterations: int = 10
    large_threshold: int = 10_000

    def __post_init__(self) -> None:
        if self.iterations < 1 or self.large_iterations < 1:
            raise ValueError("Benchmark iterations must be at least 1")
        if self.warmup < 0:
            raise ValueError(f"Warmup cannot be negative: {self.warmup}")

    def iterations_for(self, a: str, b: str) -> int:
        """Number of timed calls for a pair of operands."""
        if max(len(a), len(b)) > self.large_threshold:
            return self.large_iterations
        return self.iterations

    @classmethod
    def from_env(cls, base: "BenchmarkConfig | None" = None) -> "BenchmarkConfig":
        """Apply environment overrides on top of a base configuration.

        Environment variables:
        - NUMSTRCMP_BENCH_ITERATIONS
        - NUMSTRCMP_BENCH_WARMUP
        - NUMSTRCMP_BENCH_LARGE_ITERATIONS
        """
        config = base or cls()
        overrides: dict[str, int] = {}
        for field_name, env_var in (
            ("iterations", "NUMSTRCMP_BENCH_ITERATIONS"),
            ("warmup", "NUMSTRCMP_BENCH_WARMUP"),
            ("large_iterations", "NUMSTRCMP_BENCH_LARGE_ITERATIONS"),
        ):
            raw = os.environ.get(env_var)
            if raw is not None:
                try:
                    overrides[field_name] = int(raw)
                except ValueError as err:
                    raise ValueError(f"{env_var} must be an integer: '{raw}'") from err
        return replace(config, **overrides)


# Default configuration instance
DEFAULT_BENCHMARK_CONFIG = BenchmarkConfig()
