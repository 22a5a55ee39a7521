from __future__ import annotations

import multiprocessing as mp
from collections.abc import Sequence
from concurrent.futures import ALL_COMPLETED, Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor, wait

from prime_count.adapters.logging import log_event
from prime_count.adapters.services.prime_checker import TrialDivisionPrimeChecker
from prime_count.domain.chunks import Chunk, partition
from prime_count.domain.messages import ExecutorKind
from prime_count.domain.reasons import ReasonCode
from prime_count.ports.log_sink import LogSink
from prime_count.ports.prime_checker import PrimeChecker

_DEFAULT_CHECKER = TrialDivisionPrimeChecker()


class WorkerTaskError(RuntimeError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.reason = ReasonCode.WORKER_TASK_FAILED
        self.cause = cause


def count_values(values: Sequence[int], checker: PrimeChecker = _DEFAULT_CHECKER) -> int:
    # Worker entry point for process pools: only the chunk's own values are shipped.
    local = 0
    for n in values:
        if checker.is_prime(n):
            local += 1
    return local


def count_chunk(numbers: Sequence[int], chunk: Chunk, checker: PrimeChecker = _DEFAULT_CHECKER) -> int:
    # Reads numbers[chunk.start:chunk.end] and nothing else.
    local = 0
    for i in range(chunk.start, chunk.end):
        if checker.is_prime(numbers[i]):
            local += 1
    return local


def count_sequential(numbers: Sequence[int], checker: PrimeChecker = _DEFAULT_CHECKER) -> int:
    # Reference result for the parallel pass.
    return count_values(numbers, checker)


def count_parallel(
    numbers: Sequence[int],
    workers: int,
    *,
    executor: ExecutorKind = "process",
    start_method: str = "spawn",
    checker: PrimeChecker = _DEFAULT_CHECKER,
    log: LogSink | None = None,
) -> int:
    """Count primes with one concurrent task per chunk and sum the partial counts.

    Blocks until every task has finished; there is no early return, cancellation
    or timeout. An empty sequence returns 0 without starting a pool. If a task
    raised, WorkerTaskError is raised once all tasks are done.
    """
    chunks = partition(len(numbers), workers)
    if not chunks:
        return 0

    log_event(
        log,
        "DEBUG",
        "parallel_dispatch",
        executor=executor,
        workers=len(chunks),
        chunks=[[chunk.start, chunk.end] for chunk in chunks],
    )

    with _build_executor(executor, len(chunks), start_method) as pool:
        futures = [_submit(pool, executor, numbers, chunk, checker) for chunk in chunks]
        # Completion barrier: all partial counts are in before anything is summed.
        wait(futures, return_when=ALL_COMPLETED)

    total = 0
    for future in futures:
        error = future.exception()
        if error is not None:
            log_event(log, "ERROR", "worker_task_failed", reason=ReasonCode.WORKER_TASK_FAILED.value, error=repr(error))
            raise WorkerTaskError(error) from error
        total += future.result()
    return total


def _build_executor(kind: ExecutorKind, size: int, start_method: str) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=size, thread_name_prefix="prime-count")
    if kind == "process":
        return ProcessPoolExecutor(max_workers=size, mp_context=mp.get_context(start_method))
    raise ValueError(f"Unknown executor kind: {kind!r}")


def _submit(
    pool: Executor,
    kind: ExecutorKind,
    numbers: Sequence[int],
    chunk: Chunk,
    checker: PrimeChecker,
) -> Future[int]:
    if kind == "process":
        return pool.submit(count_values, chunk.take(numbers), checker)
    # Threads share the read-only sequence and index into their own range.
    return pool.submit(count_chunk, numbers, chunk, checker)
