"""Command-line front end: reads whitespace-separated integers and prints answers."""

from __future__ import annotations

import argparse
import sys

from modmath.divisors import divisor_counts
from modmath.modular import FactorialTable
from modmath.primes import next_prime, permutation_rounds
from modmath.probability import expected_inversions, format_expectation


def _counted(numbers, width):
    """Return the ``count * width`` integers that follow a leading count."""
    if not numbers:
        raise ValueError("input is empty: expected a count first")
    count = numbers[0]
    if count < 0:
        raise ValueError("count must be non-negative")
    needed = count * width
    body = numbers[1 : 1 + needed]
    if len(body) < needed:
        raise ValueError(f"expected {needed} values after the count, got {len(body)}")
    return body


def _binomial(numbers):
    body = _counted(numbers, 2)
    pairs = list(zip(body[0::2], body[1::2]))
    if any(a < 0 for a, _ in pairs):
        raise ValueError("n must be non-negative")
    table = FactorialTable(max((a for a, _ in pairs), default=0))
    return [str(table.choose(a, b)) for a, b in pairs]


def _divisors(numbers):
    values = _counted(numbers, 1)
    if any(v < 1 for v in values):
        raise ValueError("values must be positive integers")
    counts = divisor_counts(max(values, default=0))
    return [str(counts[v]) for v in values]


def _next_prime(numbers):
    return [str(next_prime(n)) for n in _counted(numbers, 1)]


def _inversions(numbers):
    ranges = _counted(numbers, 1)
    return format_expectation(expected_inversions(ranges)).splitlines()


def _rounds(numbers):
    return [str(permutation_rounds(_counted(numbers, 1)))]


_COMMANDS = {
    "binomial": (_binomial, "binomial coefficients C(a, b) modulo 1e9+7 for each query"),
    "divisors": (_divisors, "number of divisors of each value"),
    "next-prime": (_next_prime, "smallest prime greater than each value"),
    "inversions": (_inversions, "expected inversions for uniform values on 1..r_i"),
    "rounds": (_rounds, "rounds until a permutation restores order, modulo 1e9+7"),
}


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="modmath",
        description="Number-theory and combinatorics problems over integer input.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        command = sub.add_parser(name, help=help_text)
        command.add_argument(
            "-i",
            "--input",
            default="-",
            help="file holding the input; '-' reads standard input (default)",
        )
    return parser


def _read_integers(path):
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"input must consist of integers: {exc}") from None


def main(argv=None):
    """Run one command and print its answers; return the exit status."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        lines = handler(_read_integers(args.input))
    except (ValueError, OSError) as exc:
        print(f"modmath: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())