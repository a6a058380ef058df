"""Modular arithmetic: fast powers, factorial tables and binomial counts."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from itertools import accumulate

MOD = 1_000_000_007


def powmod(base, exp, mod):
    """Return ``base ** exp % mod`` by repeated squaring; an exponent of 0 gives 1."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    if mod < 1:
        raise ValueError("modulus must be positive")
    result = 1
    base %= mod
    while exp:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


class FactorialTable:
    """Factorials and their modular inverses for every n up to ``limit``."""

    def __init__(self, limit=1_000_000, mod=MOD):
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.mod = mod
        self._factorials = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % mod, initial=1)
        )
        top = self._factorials[-1]
        if top % mod == 0:
            raise ValueError("modulus must be a prime larger than the limit")
        descending = accumulate(
            range(limit, 0, -1),
            lambda acc, i: acc * i % mod,
            initial=powmod(top, mod - 2, mod),
        )
        self._inverses = list(descending)[::-1]

    def _check(self, n):
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the table range 0..{self.limit}")

    def factorial(self, n):
        """Return ``n! % mod``."""
        self._check(n)
        return self._factorials[n]

    def inverse_factorial(self, n):
        """Return the modular inverse of ``n!``."""
        self._check(n)
        return self._inverses[n]

    def choose(self, n, k):
        """Return the binomial coefficient ``C(n, k) % mod``; 0 when k is out of range."""
        self._check(n)
        if k < 0 or k > n:
            return 0
        return self._factorials[n] * self._inverses[k] % self.mod * self._inverses[n - k] % self.mod


@lru_cache(maxsize=8)
def _table(limit):
    return FactorialTable(limit)


def count_string_arrangements(s):
    """Number of distinct strings formed by rearranging the characters of ``s``, modulo MOD."""
    table = _table(len(s))
    result = table.factorial(len(s))
    for occurrences in Counter(s).values():
        result = result * table.inverse_factorial(occurrences) % MOD
    return result


def distribute_apples(children, apples):
    """Ways to hand ``apples`` identical apples to ``children`` children, modulo MOD."""
    if children < 1:
        raise ValueError("there must be at least one child")
    if apples < 0:
        raise ValueError("the number of apples must be non-negative")
    n = children + apples - 1
    return _table(n).choose(n, apples)


def power_tower(a, b, c):
    """Return ``a ** (b ** c) % MOD``, reducing the exponent modulo ``MOD - 1``."""
    if a < 0 or b < 0 or c < 0:
        raise ValueError("arguments must be non-negative")
    exponent = powmod(b, c, MOD - 1)
    return powmod(a, exponent, MOD)