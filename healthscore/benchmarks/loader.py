"""Load and validate benchmark override files."""

from __future__ import annotations

import json
from pathlib import Path

from healthscore.benchmarks.schema import (
    DEFAULT_BENCHMARKS,
    BenchmarkOverrides,
    BenchmarkValues,
)


def load_benchmark_overrides(file_path: Path) -> BenchmarkOverrides:
    """Load a partial benchmark configuration from a JSON file."""
    if not file_path.exists():
        raise FileNotFoundError(f"Benchmark config not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    return BenchmarkOverrides.model_validate(raw)


def load_benchmarks(file_path: Path | None = None) -> BenchmarkValues:
    """Return the defaults, with the overrides from ``file_path`` applied if given."""
    if file_path is None:
        return DEFAULT_BENCHMARKS
    return DEFAULT_BENCHMARKS.with_overrides(load_benchmark_overrides(file_path))
