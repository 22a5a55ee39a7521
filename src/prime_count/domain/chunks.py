from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Chunk:
    # Half-open index range [start, end) into the number sequence.
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid chunk bounds: [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def take(self, numbers: Sequence[int]) -> tuple[int, ...]:
        return tuple(numbers[self.start : self.end])


def effective_workers(n: int, workers: int) -> int:
    # Never more workers than items (no empty chunks), never fewer than one.
    return max(1, min(workers, n))


def partition(n: int, workers: int) -> tuple[Chunk, ...]:
    """Split [0, n) into at most `workers` contiguous, near-equal chunks.

    Chunk size is ceil(n / effective_workers); the final chunk is clipped to n.
    An empty range yields no chunks.
    """
    if n <= 0:
        return ()

    size = -(-n // effective_workers(n, workers))
    return tuple(Chunk(start, min(start + size, n)) for start in range(0, n, size))
