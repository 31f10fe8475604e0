from .timing import (
    Stopwatch,
    TimingResult,
    BenchmarkResult,
    simulated_workload,
    measure,
    assert_completes_within,
    benchmark,
)

__all__ = [
    "Stopwatch",
    "TimingResult",
    "BenchmarkResult",
    "simulated_workload",
    "measure",
    "assert_completes_within",
    "benchmark",
]
