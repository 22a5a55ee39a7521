from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ExecutorKind = Literal["process", "thread"]


@dataclass(frozen=True, slots=True)
class ModeResult:
    # Prime count and wall time for one counting mode.
    prime_count: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000.0


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    input_path: str
    total_numbers: int
    requested_workers: int
    effective_workers: int
    executor: ExecutorKind
    sequential: ModeResult
    parallel: ModeResult

    @property
    def counts_match(self) -> bool:
        return self.sequential.prime_count == self.parallel.prime_count
