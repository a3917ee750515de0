"""Integer helpers used to plan Romberg refinement levels."""

from __future__ import annotations

from numbers import Integral

__all__ = [
    "is_power_of_two",
    "prime_factors",
    "count_prime_factors",
]


def is_power_of_two(m: int) -> bool:
    """Returns True if ``m`` is a positive integer power of two (including ``1``)."""
    return m > 0 and (m & (m - 1)) == 0


def prime_factors(m: int) -> list[tuple[int, int]]:
    """Computes the prime factorization of ``m`` by trial division.

    Trial division up to ``sqrt(m)`` is plenty for realistic sample counts.
    The output is deterministic: primes are listed in ascending order.

    Args:
        m: Positive integer to factor.

    Returns:
        List of ``(prime, multiplicity)`` pairs in ascending prime order.
        ``m == 1`` gives an empty list.

    Raises:
        ValueError: If ``m`` is not a positive integer.
    """
    if isinstance(m, bool) or not isinstance(m, Integral) or m < 1:
        raise ValueError(f"prime_factors requires a positive integer; got {m!r}.")

    m = int(m)
    factors: list[tuple[int, int]] = []

    # powers of two first so the loop below only visits odd candidates
    k = (m & -m).bit_length() - 1
    if k:
        factors.append((2, k))
        m >>= k

    p = 3
    while p * p <= m:
        if m % p == 0:
            e = 0
            while m % p == 0:
                m //= p
                e += 1
            factors.append((p, e))
        p += 2

    if m > 1:
        factors.append((m, 1))
    return factors


def count_prime_factors(m: int) -> int:
    """Returns the number of prime factors of ``m`` counted with multiplicity."""
    return sum(e for _, e in prime_factors(m))
