"""Solutions for the problems of round 969 (division 2)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import reduce
from itertools import pairwise
from math import gcd

from cfsolve.round960 import _ints, _run, _show


def max_operations(low: int, high: int) -> int:
    """Most triples of pairwise coprime numbers removable from the range [low, high]."""
    count = 0
    current = low
    while current <= high - 2:
        if current % 2 == 1:
            count += 1
            current += 4
        else:
            current += 1
    return count


def track_maximum(
    values: Iterable[int], operations: Iterable[tuple[str, int, int]]
) -> list[int]:
    """Array maximum after each '+ l r' or '- l r' range operation."""
    maximum = max(max(values, default=0), 0)
    results = []
    for op, low, high in operations:
        if op not in ("+", "-"):
            raise ValueError(f"unknown operation {op!r}")
        if low <= maximum <= high:
            maximum += 1 if op == "+" else -1
        results.append(maximum)
    return results


def min_range(values: Iterable[int], a: int, b: int) -> int:
    """Smallest possible range after adding multiples of a and b to the elements."""
    step = reduce(gcd, (a, b))
    if step <= 0:
        raise ValueError("a and b must not both be zero")
    residues = sorted(value % step for value in values)
    if not residues:
        raise ValueError("at least one value is required")
    best = residues[-1] - residues[0]
    for smaller, larger in pairwise(residues):
        best = min(best, smaller + step - larger)
    return best


def _solve_a(tokens: Iterator[str]) -> str:
    return _show(max_operations(*_ints(tokens, 2)))


def _solve_b(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    values = _ints(tokens, n)
    operations = [(next(tokens), *_ints(tokens, 2)) for _ in range(m)]
    return _show(track_maximum(values, operations))


def _solve_c(tokens: Iterator[str]) -> str:
    n, a, b = _ints(tokens, 3)
    return _show(min_range(_ints(tokens, n), a, b))


_SOLVERS = {"A": _solve_a, "B": _solve_b, "C": _solve_c}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round969", "Round 969 solutions.", _SOLVERS, argv)