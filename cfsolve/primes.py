"""Prime sieve and puzzles about primes."""

from __future__ import annotations

from itertools import pairwise

_NOLDBACH_LIMIT = 1001
_NEXT_PRIME_LIMIT = 500


def sieve(limit: int) -> list[int]:
    """Return the primes below ``limit`` in ascending order."""
    if limit <= 2:
        return []
    is_prime = [True] * limit
    is_prime[0] = is_prime[1] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = [False] * len(range(i * i, limit, i))
    return [i for i, flag in enumerate(is_prime) if flag]


def noldbach(n: int, k: int) -> bool:
    """Tell whether at least ``k`` primes up to ``n`` equal one plus the sum
    of two neighbouring primes."""
    primes = sieve(max(_NOLDBACH_LIMIT, n + 1))
    neighbour_sums = {p + q for p, q in pairwise(primes)}
    count = sum(1 for p in primes if p <= n and p - 1 in neighbour_sums)
    return count >= k


def _distinct_prime_factors(n: int) -> set[int]:
    factors = set()
    while n % 2 == 0 and n > 0:
        n //= 2
        factors.add(2)
    d = 3
    while d * d <= n:
        while n % d == 0:
            n //= d
            factors.add(d)
        d += 2
    if n > 1:
        factors.add(n)
    return factors


def count_almost_primes(n: int) -> int:
    """Count the numbers from 1 to ``n`` with exactly two distinct prime divisors."""
    return sum(1 for i in range(1, n + 1) if len(_distinct_prime_factors(i)) == 2)


def is_next_prime(n: int, m: int) -> bool:
    """Tell whether ``m`` is the prime that follows the prime ``n``."""
    primes = sieve(max(_NEXT_PRIME_LIMIT, 2 * n + 2))
    try:
        index = primes.index(n)
    except ValueError:
        raise ValueError(f"{n} is not a prime") from None
    return primes[index + 1] == m