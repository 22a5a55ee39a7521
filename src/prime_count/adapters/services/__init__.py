from .prime_checker import TrialDivisionPrimeChecker

__all__ = ["TrialDivisionPrimeChecker"]
