from __future__ import annotations

from dataclasses import dataclass

from prime_count.domain.primality import is_prime
from prime_count.ports.prime_checker import PrimeChecker


@dataclass(frozen=True, slots=True)
class TrialDivisionPrimeChecker(PrimeChecker):
    # Stateless 6k +/- 1 trial division; instances pickle cleanly into worker processes.

    def is_prime(self, n: int) -> bool:
        return is_prime(n)
