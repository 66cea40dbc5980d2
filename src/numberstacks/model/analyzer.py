"""Number analysis: primality and factor pairs by trial division."""
from __future__ import annotations

from math import isqrt
from typing import Optional

FactorPair = tuple[int, int]


def is_prime(n: int) -> bool:
    """Return True if `n` is prime. Numbers below 2 are never prime."""
    if n < 2:
        return False
    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def factor_pairs(n: int) -> list[FactorPair]:
    """
    Enumerate the (columns, rows) pairs with columns * rows == n and both sides >= 2.

    Each divisor appears once as the `columns` value; pairs are sorted by columns.
    Primes and numbers below 4 give an empty list.

    Example:
        >>> factor_pairs(12)
        [(2, 6), (3, 4), (4, 3), (6, 2)]
    """
    pairs: list[FactorPair] = []
    if n < 4:
        return pairs

    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            q = n // d
            pairs.append((d, q))
            if d != q:
                pairs.append((q, d))

    return sorted(pairs, key=lambda pair: pair[0])


def smallest_prime_factor(n: int) -> Optional[int]:
    """Smallest prime dividing `n` (n itself for primes), or None below 2."""
    if n < 2:
        return None
    pairs = factor_pairs(n)
    if not pairs:
        return n
    # the smallest divisor >= 2 of a composite is always prime
    return pairs[0][0]
