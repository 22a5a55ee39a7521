from __future__ import annotations


def is_prime(n: int) -> bool:
    """Return True if n is prime.

    Trial division by 2 and 3, then by candidates of the form 6k-1 and 6k+1
    (5, 7, 11, 13, ...) while the candidate squared does not exceed n.
    """
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    # Integer comparison only; a float sqrt loses precision near the int64 edge.
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True
