"""Divisor counting, common divisors and inclusion-exclusion counts."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from math import isqrt, prod


def divisor_counts(limit):
    """Return a list whose entry n is the number of divisors of n (entry 0 is 0)."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    counts = [0] * (limit + 1)
    for a in range(1, isqrt(limit) + 1):
        for product in range(a * (a + 1), limit + 1, a):
            counts[product] += 2
        counts[a * a] += 1
    return counts


def _require_positive(values):
    values = list(values)
    if any(v < 1 for v in values):
        raise ValueError("values must be positive integers")
    return values


def max_common_divisor(values):
    """Largest gcd over all pairs of the given values; 1 when there is no pair."""
    values = _require_positive(values)
    if not values:
        return 1
    counts = Counter(values)
    largest = max(counts)
    tally = [0] * (largest + 1)
    for value, occurrences in counts.items():
        tally[value] = occurrences
    best = max((v for v, c in counts.items() if c > 1), default=1)
    for d in range(best + 1, largest // 2 + 2):
        if sum(tally[d::d]) > 1:
            best = d
    return best


def distinct_prime_factors(n):
    """Return the distinct prime factors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            factors.append(p)
            while n % p == 0:
                n //= p
        p += 1
    if n > 1:
        factors.append(n)
    return factors


def _smallest_prime_factors(limit):
    spf = list(range(limit + 1))
    for p in range(2, isqrt(limit) + 1):
        if spf[p] == p:
            for multiple in range(p * p, limit + 1, p):
                if spf[multiple] == multiple:
                    spf[multiple] = p
    return spf


def _sieved_primes(spf, num):
    primes = []
    while num > 1:
        p = spf[num]
        primes.append(p)
        while num % p == 0:
            num //= p
    return primes


def _squarefree_divisors(primes):
    """Yield (divisor, number of primes) for every non-empty subset of ``primes``."""
    for size in range(1, len(primes) + 1):
        for combo in combinations(primes, size):
            yield prod(combo), size


def count_coprime_pairs(values):
    """Number of unordered pairs of positions whose values are coprime."""
    values = _require_positive(values)
    if not values:
        return 0
    n = len(values)
    freq = Counter(values)
    spf = _smallest_prime_factors(max(freq))
    factors = {num: _sieved_primes(spf, num) for num in freq}

    multiples = Counter()
    for num, f in freq.items():
        for divisor, _ in _squarefree_divisors(factors[num]):
            multiples[divisor] += f

    total = 0
    for num, f in freq.items():
        if num == 1:
            total += f * (n - 1)
            continue
        noncoprime = sum(
            multiples[d] if size % 2 else -multiples[d]
            for d, size in _squarefree_divisors(factors[num])
        )
        total += f * (n - noncoprime)
    return total // 2


def count_prime_multiples(n, primes):
    """How many of 1..n are divisible by at least one of the given distinct primes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    primes = list(primes)
    if any(p < 2 for p in primes):
        raise ValueError("primes must be at least 2")
    total = 0
    for size in range(1, len(primes) + 1):
        for combo in combinations(primes, size):
            multiple = 1
            for p in combo:
                if n // multiple < p:
                    break
                multiple *= p
            else:
                total += n // multiple if size % 2 else -(n // multiple)
    return total