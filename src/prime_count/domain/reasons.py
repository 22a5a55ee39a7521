from __future__ import annotations

from enum import Enum


# Stable reason codes for every condition the CLI reports instead of crashing.
class ReasonCode(str, Enum):
    INPUT_READ_ERROR = "INPUT_READ_ERROR"
    NO_NUMBERS_FOUND = "NO_NUMBERS_FOUND"
    WORKER_TASK_FAILED = "WORKER_TASK_FAILED"
    COUNT_MISMATCH = "COUNT_MISMATCH"
