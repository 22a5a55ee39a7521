from __future__ import annotations

import random
import threading

import pytest

from prime_count.domain.chunks import Chunk
from prime_count.domain.reasons import ReasonCode
from prime_count.usecases.counting import (
    WorkerTaskError,
    count_chunk,
    count_parallel,
    count_sequential,
    count_values,
)

SAMPLE = (2, 3, 4, 5, -1, 0, 97)


class _RecordingChecker:
    # Records which values each thread saw so chunk isolation can be asserted.
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.seen: list[int] = []

    def is_prime(self, n: int) -> bool:
        with self._lock:
            self.seen.append(n)
        return n in {2, 3, 5, 97}


class _FailingChecker:
    def is_prime(self, n: int) -> bool:
        if n == 4:
            raise ArithmeticError("boom")
        return False


def test_count_sequential_counts_primes() -> None:
    # 2, 3, 5 and 97 are prime; 4, -1 and 0 are not.
    assert count_sequential(SAMPLE) == 4


def test_count_sequential_is_idempotent() -> None:
    assert count_sequential(SAMPLE) == count_sequential(SAMPLE)


def test_count_sequential_of_empty_sequence_is_zero() -> None:
    assert count_sequential(()) == 0


def test_count_chunk_reads_only_its_range() -> None:
    checker = _RecordingChecker()
    assert count_chunk(SAMPLE, Chunk(2, 5), checker) == 1
    assert checker.seen == [4, 5, -1]


def test_count_values_counts_a_slice() -> None:
    assert count_values((97, 98, 99, 101)) == 2


def test_count_parallel_of_empty_sequence_is_zero_without_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    # No chunks -> no executor is built.
    def _fail(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("executor must not be created")

    monkeypatch.setattr("prime_count.usecases.counting._build_executor", _fail)
    assert count_parallel((), 4, executor="thread") == 0


@pytest.mark.parametrize("workers", [1, 2, 3, 7, 8, 100])
def test_count_parallel_threads_match_sequential(workers: int) -> None:
    assert count_parallel(SAMPLE, workers, executor="thread") == count_sequential(SAMPLE)


def test_count_parallel_threads_match_sequential_on_random_input() -> None:
    rng = random.Random(1234)
    numbers = tuple(rng.randint(-1000, 200_000) for _ in range(2_000))
    expected = count_sequential(numbers)
    for workers in (1, 2, 5, 16):
        assert count_parallel(numbers, workers, executor="thread") == expected


def test_count_parallel_visits_every_element_exactly_once() -> None:
    checker = _RecordingChecker()
    numbers = tuple(range(50))
    count_parallel(numbers, 6, executor="thread", checker=checker)
    assert sorted(checker.seen) == list(numbers)


def test_count_parallel_processes_match_sequential() -> None:
    # Default executor: spawn-based process pool.
    numbers = tuple(range(-10, 300))
    assert count_parallel(numbers, 3) == count_sequential(numbers)


def test_count_parallel_wraps_worker_failures() -> None:
    with pytest.raises(WorkerTaskError) as excinfo:
        count_parallel((1, 4, 6, 8), 2, executor="thread", checker=_FailingChecker())
    assert excinfo.value.reason == ReasonCode.WORKER_TASK_FAILED
    assert isinstance(excinfo.value.cause, ArithmeticError)


def test_count_parallel_rejects_unknown_executor() -> None:
    with pytest.raises(ValueError):
        count_parallel(SAMPLE, 2, executor="fiber")  # type: ignore[arg-type]


def test_count_parallel_logs_chunk_layout() -> None:
    messages = []

    class _Sink:
        def emit(self, message: object) -> None:
            messages.append(message)

        def close(self) -> None:
            return None

    count_parallel(SAMPLE, 3, executor="thread", log=_Sink())
    dispatch = messages[0]
    assert dispatch.message == "parallel_dispatch"
    assert dispatch.fields["chunks"] == [[0, 3], [3, 6], [6, 7]]
