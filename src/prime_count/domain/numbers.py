from __future__ import annotations

import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# A number is a maximal run of ASCII digits with at most one leading minus sign.
# Everything else separates tokens, so "--5" reads as -5 and "5-3" as 5, -3.
_NUMBER_PATTERN = re.compile(r"-?[0-9]+")

# Significant digits in 2**63; anything longer cannot be an int64.
_MAX_SIGNIFICANT_DIGITS = len(str(2**63))


def parse_numbers(text: str) -> tuple[int, ...]:
    # Tokens outside the signed 64-bit range are skipped like any other malformed token.
    numbers: list[int] = []
    for match in _NUMBER_PATTERN.finditer(text):
        token = match.group()
        # Length check first: int() refuses very long digit strings outright.
        if len(token.lstrip("-").lstrip("0")) > _MAX_SIGNIFICANT_DIGITS:
            continue
        value = int(token)
        if INT64_MIN <= value <= INT64_MAX:
            numbers.append(value)
    return tuple(numbers)
