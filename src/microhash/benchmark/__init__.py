"""Collision benchmark for microhash hash functions."""

from microhash.benchmark.collisions import (
    BENCHMARK_GENERATORS,
    BenchmarkResult,
    CollisionBenchmark,
    run_benchmark,
    run_benchmarks,
)
from microhash.benchmark.lcg import (
    LCG32,
    LCG64,
    LCG64_NARROW,
    LCGParams,
    LinearCongruentialGenerator,
)
from microhash.benchmark.report import format_report, format_table

__all__ = [
    "CollisionBenchmark",
    "BenchmarkResult",
    "BENCHMARK_GENERATORS",
    "run_benchmark",
    "run_benchmarks",
    "LCGParams",
    "LCG32",
    "LCG64",
    "LCG64_NARROW",
    "LinearCongruentialGenerator",
    "format_report",
    "format_table",
]
