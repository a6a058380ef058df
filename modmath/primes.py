"""Primality, next primes and permutation cycle arithmetic."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from math import isqrt

from modmath.modular import MOD


def is_prime(m):
    """Return True if ``m`` is prime, by trial division."""
    if m < 2:
        return False
    if m % 2 == 0:
        return m == 2
    return all(m % d for d in range(3, isqrt(m) + 1, 2))


@lru_cache(maxsize=4096)
def next_prime(n):
    """Return the smallest prime strictly greater than ``n``."""
    if n < 2:
        return 2
    candidate = n + 1 if n % 2 == 0 else n + 2
    while not is_prime(candidate):
        candidate += 2
    return candidate


def cycle_lengths(permutation):
    """Set of lengths of the non-trivial cycles of a permutation of 1..n.

    ``permutation[i - 1]`` is where element ``i`` goes.
    """
    perm = list(permutation)
    if sorted(perm) != list(range(1, len(perm) + 1)):
        raise ValueError("not a permutation of 1..n")
    seen = [False] * (len(perm) + 1)
    lengths = set()
    for start, dest in enumerate(perm, 1):
        if seen[start] or dest == start:
            continue
        seen[start] = True
        length = 1
        current = dest
        while current != start:
            seen[current] = True
            current = perm[current - 1]
            length += 1
        lengths.add(length)
    return lengths


def _factorize(n):
    factors = Counter()
    p = 2
    while p * p <= n:
        while n % p == 0:
            factors[p] += 1
            n //= p
        p += 1
    if n > 1:
        factors[n] += 1
    return factors


def lcm_mod(numbers, mod=MOD):
    """Least common multiple of ``numbers`` reduced modulo ``mod``."""
    exponents = Counter()
    for number in numbers:
        if number < 1:
            raise ValueError("numbers must be positive")
        for prime, power in _factorize(number).items():
            exponents[prime] = max(exponents[prime], power)
    result = 1
    for prime, power in exponents.items():
        result = result * pow(prime, power, mod) % mod
    return result


def permutation_rounds(permutation):
    """Rounds needed until repeated application of the permutation restores order, modulo MOD."""
    return lcm_mod(cycle_lengths(permutation))