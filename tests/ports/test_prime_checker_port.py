from __future__ import annotations

import pickle

import pytest

from prime_count.adapters.services.prime_checker import TrialDivisionPrimeChecker
from prime_count.ports.prime_checker import PrimeChecker


def test_prime_checker_port_conformance() -> None:
    # Adapter should conform to the PrimeChecker port at runtime for wiring safety.
    assert isinstance(TrialDivisionPrimeChecker(), PrimeChecker)


def test_prime_checker_port_returns_bool() -> None:
    checker = TrialDivisionPrimeChecker()
    for value in (-5, 0, 1, 2, 9, 11):
        assert isinstance(checker.is_prime(value), bool)


def test_prime_checker_survives_pickling() -> None:
    # Process pools ship the checker to workers, so it must round-trip through pickle.
    checker = pickle.loads(pickle.dumps(TrialDivisionPrimeChecker()))
    assert checker.is_prime(97) is True


def test_prime_checker_port_default_raises() -> None:
    # Direct port calls are a wiring error; the default implementation raises.
    class _PortOnly(PrimeChecker):
        pass

    with pytest.raises(NotImplementedError):
        _PortOnly().is_prime(2)
