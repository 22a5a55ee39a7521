from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from prime_count.adapters.logging import log_event
from prime_count.domain.chunks import partition
from prime_count.domain.messages import BenchmarkReport, ExecutorKind, ModeResult
from prime_count.domain.reasons import ReasonCode
from prime_count.ports.log_sink import LogSink
from prime_count.usecases.counting import count_parallel, count_sequential


def run_benchmark(
    numbers: Sequence[int],
    workers: int,
    *,
    input_path: str,
    executor: ExecutorKind = "process",
    start_method: str = "spawn",
    clock: Callable[[], int] = time.perf_counter_ns,
    log: LogSink | None = None,
) -> BenchmarkReport:
    """Time the sequential pass, then the parallel pass, over the same numbers.

    A count mismatch is logged and surfaced via ``BenchmarkReport.counts_match``;
    it never aborts the run.
    """
    started = clock()
    sequential_count = count_sequential(numbers)
    sequential = ModeResult(prime_count=sequential_count, elapsed_ns=clock() - started)
    log_event(log, "INFO", "mode_completed", mode="sequential", prime_count=sequential_count)

    started = clock()
    parallel_count = count_parallel(
        numbers,
        workers,
        executor=executor,
        start_method=start_method,
        log=log,
    )
    parallel = ModeResult(prime_count=parallel_count, elapsed_ns=clock() - started)
    log_event(log, "INFO", "mode_completed", mode="parallel", prime_count=parallel_count)

    report = BenchmarkReport(
        input_path=input_path,
        total_numbers=len(numbers),
        requested_workers=workers,
        # Header shows the number of tasks launched, which can be below the clamped request.
        effective_workers=len(partition(len(numbers), workers)),
        executor=executor,
        sequential=sequential,
        parallel=parallel,
    )
    if not report.counts_match:
        log_event(
            log,
            "WARNING",
            "count_mismatch",
            reason=ReasonCode.COUNT_MISMATCH.value,
            sequential=sequential_count,
            parallel=parallel_count,
        )
    return report
