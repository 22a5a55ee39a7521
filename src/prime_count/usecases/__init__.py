from .benchmark import run_benchmark
from .counting import WorkerTaskError, count_chunk, count_parallel, count_sequential, count_values
from .format_report import MISMATCH_WARNING, format_report

__all__ = [
    "MISMATCH_WARNING",
    "WorkerTaskError",
    "count_chunk",
    "count_parallel",
    "count_sequential",
    "count_values",
    "format_report",
    "run_benchmark",
]
