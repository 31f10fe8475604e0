"""
Timing helpers for the performance example.

The example itself is deliberately small: block for a fixed duration, measure it, and assert the
elapsed time stays under a threshold. `benchmark()` repeats a call for a rough throughput figure.
"""

from __future__ import annotations

import logging
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable

from qa_types.exceptions.base import InvalidInputError, ThresholdExceededError

logger = logging.getLogger(__name__)


class Stopwatch:
    """
    Context manager measuring wall-clock time with `time.perf_counter()`.

        with Stopwatch() as sw:
            do_work()
        sw.elapsed  # seconds, float
    """

    def __init__(self) -> None:
        self._start: float | None = None
        self._end: float | None = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds since entering; frozen once the block exits."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)


@dataclass(frozen=True)
class TimingResult:
    elapsed: float
    value: Any = None

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)


@dataclass(frozen=True)
class BenchmarkResult:
    iterations: int
    minimum: float
    maximum: float
    mean: float

    @property
    def per_second(self) -> float:
        """Calls per second at the mean duration."""
        return 1.0 / self.mean if self.mean > 0 else float("inf")


def simulated_workload(duration: float) -> float:
    """
    Stand-in for the operation under test: blocks the calling thread for `duration` seconds.

    Raises:
        InvalidInputError: if duration is negative.
    """
    if duration < 0:
        raise InvalidInputError(f"duration must be >= 0, got {duration!r}", fields=["duration"])
    time.sleep(duration)
    return duration


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def measure(func: Callable[..., Any], *args: Any, **kwargs: Any) -> TimingResult:
    """Call `func(*args, **kwargs)` and return its value together with the elapsed time."""
    with Stopwatch() as sw:
        value = func(*args, **kwargs)
    logger.debug("perf.measure.done", extra={"operation": _name(func), "duration_ms": sw.elapsed_ms})
    return TimingResult(elapsed=sw.elapsed, value=value)


def assert_completes_within(threshold: float, func: Callable[..., Any], *args: Any, **kwargs: Any) -> TimingResult:
    """
    Run `func` and check it finished in under `threshold` seconds.

    Returns the TimingResult on success.

    Raises:
        InvalidInputError: if threshold is not positive.
        ThresholdExceededError: if the call took `threshold` seconds or longer.
    """
    if threshold <= 0:
        raise InvalidInputError(f"threshold must be > 0, got {threshold!r}", fields=["threshold"])

    result = measure(func, *args, **kwargs)
    operation = _name(func)
    if result.elapsed >= threshold:
        logger.warning(
            "perf.threshold_exceeded",
            extra={"operation": operation, "duration_ms": result.elapsed_ms, "threshold_ms": int(threshold * 1000)},
        )
        raise ThresholdExceededError(result.elapsed, threshold, operation=operation)

    logger.info(
        "perf.within_threshold",
        extra={"operation": operation, "duration_ms": result.elapsed_ms, "threshold_ms": int(threshold * 1000)},
    )
    return result


def benchmark(func: Callable[..., Any], *args: Any, iterations: int = 10, **kwargs: Any) -> BenchmarkResult:
    """
    Call `func` `iterations` times and summarize the durations.

    Raises:
        InvalidInputError: if iterations < 1.
    """
    if iterations < 1:
        raise InvalidInputError(f"iterations must be >= 1, got {iterations!r}", fields=["iterations"])

    durations = [measure(func, *args, **kwargs).elapsed for _ in range(iterations)]
    result = BenchmarkResult(
        iterations=iterations,
        minimum=min(durations),
        maximum=max(durations),
        mean=statistics.fmean(durations),
    )
    logger.info(
        "perf.benchmark.done",
        extra={"operation": _name(func), "iterations": iterations, "mean_ms": int(result.mean * 1000)},
    )
    return result
