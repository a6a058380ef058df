# modmath

A small collection of number-theory and combinatorics routines. They use exact
integer arithmetic, and many of them give answers modulo 10^9 + 7
(`modmath.modular.MOD`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `modmath.modular`

- `powmod(base, exp, mod)`: `base ** exp % mod` by repeated squaring. Raises
  `ValueError` for a negative exponent or a modulus below 1.
- `FactorialTable(limit=1_000_000, mod=MOD)`: factorials and inverse factorials
  for every n in `0..limit`, with `factorial(n)`, `inverse_factorial(n)` and
  `choose(n, k)`. `choose` returns 0 when `k` is outside `0..n`; an `n` outside
  the table raises `ValueError`. The modulus must be a prime larger than the limit.
- `count_string_arrangements(s)`: the number of distinct strings formed by
  rearranging the characters of `s`, modulo MOD.
- `distribute_apples(children, apples)`: the number of ways to hand out
  `apples` identical apples among `children` children, modulo MOD.
- `power_tower(a, b, c)`: `a ** (b ** c)` modulo MOD, with the exponent reduced
  modulo MOD - 1.

```python
from modmath.modular import powmod, count_string_arrangements, distribute_apples

powmod(2, 10, 10**9 + 7)            # 1024
count_string_arrangements("aabac")  # 20
distribute_apples(3, 2)             # 6
```

### `modmath.divisors`

- `divisor_counts(limit)`: a list whose entry n is the number of divisors of n
  (entry 0 is 0).
- `max_common_divisor(values)`: the largest gcd of any pair of the values; 1
  when there is no pair.
- `distinct_prime_factors(n)`: the distinct primes dividing `n`, ascending.
- `count_coprime_pairs(values)`: how many unordered pairs of positions hold
  coprime values.
- `count_prime_multiples(n, primes)`: how many integers in 1..n are divisible
  by at least one of the given distinct primes (inclusion–exclusion).

```python
from modmath.divisors import count_prime_multiples, max_common_divisor

count_prime_multiples(20, [2, 5])  # 12
max_common_divisor([2, 4, 6, 3])   # 3
```

### `modmath.primes`

- `is_prime(m)`: trial-division primality test.
- `next_prime(n)`: the smallest prime strictly greater than `n` (results are cached).
- `cycle_lengths(permutation)`: the set of lengths of the non-trivial cycles of
  a permutation of 1..n, where `permutation[i - 1]` is where element `i` goes.
- `lcm_mod(numbers, mod=MOD)`: the least common multiple reduced modulo `mod`.
- `permutation_rounds(permutation)`: how many times the permutation must be
  applied before every element is back in place, modulo MOD.

```python
from modmath.primes import next_prime, permutation_rounds

next_prime(10)                   # 11
permutation_rounds([2, 1, 4, 5, 3])  # 6
```

### `modmath.probability`

- `expected_inversions(ranges)`: the exact expected number of inversions, as a
  `fractions.Fraction`, when the i-th element is drawn uniformly from 1..ranges[i].
- `format_expectation(value)`: renders a fraction as `num/denom` on one line and
  its value to six decimals on the next.

## Command line

The `modmath` command reads whitespace-separated integers from standard input,
or from a file given with `-i/--input`, and prints one answer per line. Every
input starts with a count followed by that many items.

```
modmath --help
echo "2  5 2  10 3" | modmath binomial      # C(a, b) mod 1e9+7 per pair: 10, 120
echo "3  1 6 12" | modmath divisors         # divisor counts: 1, 4, 6
echo "2  1 10" | modmath next-prime         # 2, 11
echo "3  5 2 7" | modmath inversions        # expected inversions, fraction and decimal
echo "5  2 1 4 5 3" | modmath rounds        # rounds for a permutation of 1..n
modmath divisors -i values.txt
```

Bad input (a missing count, too few values, a non-integer token) is reported on
standard error and the command exits with status 1.

## Limits

Only the five problems above have commands. Common divisors, coprime pairs,
prime multiples, string arrangements, apple distribution and power towers are
available from Python only.