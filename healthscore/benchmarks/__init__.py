from .loader import load_benchmark_overrides, load_benchmarks
from .schema import (
    DEFAULT_BENCHMARKS,
    BenchmarkOverrides,
    BenchmarkValues,
    merge_benchmarks,
)

__all__ = [
    "DEFAULT_BENCHMARKS",
    "BenchmarkOverrides",
    "BenchmarkValues",
    "merge_benchmarks",
    "load_benchmark_overrides",
    "load_benchmarks",
]
