from .chunks import Chunk, effective_workers, partition
from .logging import LogMessage
from .messages import BenchmarkReport, ExecutorKind, ModeResult
from .numbers import INT64_MAX, INT64_MIN, parse_numbers
from .primality import is_prime
from .reasons import ReasonCode

# Public domain exports keep imports explicit across layers.
__all__ = [
    "BenchmarkReport",
    "Chunk",
    "ExecutorKind",
    "INT64_MAX",
    "INT64_MIN",
    "LogMessage",
    "ModeResult",
    "ReasonCode",
    "effective_workers",
    "is_prime",
    "parse_numbers",
    "partition",
]
