import io
import sys

import pytest

from modmath.cli import main
from modmath.divisors import divisor_counts
from modmath.modular import FactorialTable
from modmath.primes import is_prime, next_prime, permutation_rounds
from modmath.probability import expected_inversions, format_expectation


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_binomial_matches_table(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["binomial"], "3\n5 3\n10 4\n20 7\n")
    table = FactorialTable(20)
    assert code == 0
    assert out.split() == [
        str(table.choose(5, 3)),
        str(table.choose(10, 4)),
        str(table.choose(20, 7)),
    ]


def test_binomial_edges_are_one(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["binomial"], "2\n7 0\n7 7\n")
    assert code == 0
    assert out.split() == ["1", "1"]


def test_binomial_symmetry(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["binomial"], "2\n30 11\n30 19\n")
    first, second = out.split()
    assert code == 0
    assert first == second


def test_divisors_matches_library(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["divisors"], "4\n1 12 16 97\n")
    counts = divisor_counts(97)
    assert code == 0
    assert out.split() == [str(counts[v]) for v in (1, 12, 16, 97)]


def test_divisors_rejects_zero(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["divisors"], "1\n0\n")
    assert code == 1
    assert out == ""
    assert "positive" in err


def test_next_prime_outputs(monkeypatch, capsys):
    queries = [1, 2, 10, 100, 1000]
    text = f"{len(queries)}\n" + "\n".join(map(str, queries))
    code, out, _ = run(monkeypatch, capsys, ["next-prime"], text)
    results = [int(x) for x in out.split()]
    assert code == 0
    assert results == [next_prime(q) for q in queries]
    for q, r in zip(queries, results):
        assert r > q
        assert is_prime(r)


def test_inversions_matches_format(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["inversions"], "3\n5 2 7\n")
    assert code == 0
    assert out.rstrip("\n") == format_expectation(expected_inversions([5, 2, 7]))


def test_inversions_all_fixed_values(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["inversions"], "3\n1 1 1\n")
    assert code == 0
    assert out.splitlines() == ["0/1", "0.000000"]


def test_rounds_identity(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["rounds"], "4\n1 2 3 4\n")
    assert code == 0
    assert out.strip() == "1"


def test_rounds_matches_library(monkeypatch, capsys):
    perm = [2, 1, 4, 5, 3, 7, 8, 9, 10, 6]
    text = f"{len(perm)}\n" + " ".join(map(str, perm))
    code, out, _ = run(monkeypatch, capsys, ["rounds"], text)
    assert code == 0
    assert out.strip() == str(permutation_rounds(perm))


def test_rounds_rejects_non_permutation(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["rounds"], "3\n1 1 2\n")
    assert code == 1
    assert out == ""
    assert "permutation" in err


def test_missing_values_is_an_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["binomial"], "2\n5 3\n")
    assert code == 1
    assert out == ""
    assert err.startswith("modmath:")


def test_empty_input_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["next-prime"], "")
    assert code == 1
    assert "count" in err


def test_non_integer_token_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["divisors"], "2\n4 x\n")
    assert code == 1
    assert "integers" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["no-such-command"])
    assert info.value.code == 2


def test_input_file_option(tmp_path, capsys):
    source = tmp_path / "queries.txt"
    source.write_text("2\n6 8\n", encoding="utf-8")
    code = main(["divisors", "--input", str(source)])
    out = capsys.readouterr().out
    counts = divisor_counts(8)
    assert code == 0
    assert out.split() == [str(counts[6]), str(counts[8])]


def test_missing_input_file(tmp_path, capsys):
    code = main(["rounds", "-i", str(tmp_path / "absent.txt")])
    assert code == 1
    assert "modmath:" in capsys.readouterr().err