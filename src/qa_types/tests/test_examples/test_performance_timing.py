"""
Performance testing example: a 0.1 s operation must finish in under 0.5 s.
"""

import time

import pytest

from qa_types.examples.performance import (
    Stopwatch,
    assert_completes_within,
    benchmark,
    measure,
    simulated_workload,
)
from qa_types.exceptions import InvalidInputError, ThresholdExceededError

pytestmark = pytest.mark.performance


def test_simulated_workload_under_threshold(settings):
    result = assert_completes_within(settings.PERF_THRESHOLD_SECONDS, simulated_workload, 0.1)
    assert result.value == 0.1
    assert 0.1 <= result.elapsed < settings.PERF_THRESHOLD_SECONDS


def test_plain_timing_assertion():
    start_time = time.perf_counter()
    simulated_workload(0.1)
    end_time = time.perf_counter()
    assert end_time - start_time < 0.5


def test_slow_operation_exceeds_threshold():
    with pytest.raises(ThresholdExceededError) as exc_info:
        assert_completes_within(0.05, simulated_workload, 0.1)
    err = exc_info.value
    assert err.threshold == 0.05
    assert err.elapsed >= 0.1
    assert "simulated_workload" in err.message


def test_stopwatch_freezes_on_exit():
    with Stopwatch() as sw:
        time.sleep(0.02)
    frozen = sw.elapsed
    time.sleep(0.02)
    assert sw.elapsed == frozen
    assert sw.elapsed_ms >= 20


def test_unstarted_stopwatch_reads_zero():
    assert Stopwatch().elapsed == 0.0


def test_measure_returns_value():
    result = measure(sum, [1, 2, 3])
    assert result.value == 6
    assert result.elapsed >= 0


def test_benchmark_summary():
    result = benchmark(simulated_workload, 0.01, iterations=3)
    assert result.iterations == 3
    assert result.minimum <= result.mean <= result.maximum
    assert result.minimum >= 0.01
    assert 0 < result.per_second <= 100


@pytest.mark.parametrize(
    "call",
    [
        lambda: simulated_workload(-1),
        lambda: assert_completes_within(0, simulated_workload, 0),
        lambda: benchmark(simulated_workload, 0, iterations=0),
    ],
    ids=["negative-duration", "zero-threshold", "zero-iterations"],
)
def test_invalid_arguments(call):
    with pytest.raises(InvalidInputError):
        call()
