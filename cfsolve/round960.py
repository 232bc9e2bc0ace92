"""Solutions for the problems of round 960 (division 2)."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Mapping
from itertools import islice
from typing import Any

Solver = Callable[[Iterator[str]], str]


def has_odd_count(values: Iterable[int]) -> bool:
    """Return True if some value from 1 to len(values) occurs an odd number of times."""
    items = list(values)
    counts = Counter(items)
    return any(counts[value] % 2 for value in range(1, len(items) + 1))


def alternating_prefix(n: int, x: int, y: int) -> list[int]:
    """Build a +1/-1 array of length n whose maximum prefix ends at x and maximum suffix starts at y."""
    if not (1 <= x <= n and 1 <= y <= n):
        raise ValueError("positions must lie between 1 and n")

    def sign(position: int) -> int:
        if position > x:
            return -1 if (position - x) % 2 else 1
        if position < y:
            return -1 if (y - position) % 2 else 1
        return 1

    return [sign(position) for position in range(1, n + 1)]


def mad_sum(values: Iterable[int]) -> int:
    """Total of the array sums produced by repeatedly replacing prefixes with their MAD."""
    items = list(values)
    total = sum(items)

    seen: set[int] = set()
    largest_repeat = 0
    first_pass: list[int] = []
    occurrences: Counter[int] = Counter()
    for value in items:
        if value in seen:
            largest_repeat = max(largest_repeat, value)
        else:
            seen.add(value)
        first_pass.append(largest_repeat)
        occurrences[largest_repeat] += 1

    carried = 0
    current = 0
    for value in first_pass:
        total += carried + value
        if occurrences[value] >= 2:
            carried += value
            current = value
        else:
            carried += current
    return total


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    """Take the next count tokens as integers."""
    return [int(token) for token in islice(tokens, count)]


def _show(value: Any) -> str:
    """Format an answer: None as -1, lists space separated, anything else as str."""
    if value is None:
        return "-1"
    if isinstance(value, list):
        return " ".join(map(str, value))
    return str(value)


def _array_solver(func: Callable[[list[int]], Any]) -> Solver:
    """Solver for a case given as a length followed by that many integers."""

    def solve(tokens: Iterator[str]) -> str:
        n = int(next(tokens))
        return _show(func(_ints(tokens, n)))

    return solve


def _run(prog: str, description: str, solvers: Mapping[str, Solver], argv: list[str] | None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("problem", choices=sorted(solvers))
    args = parser.parse_args(argv)
    solver = solvers[args.problem]
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        print(solver(tokens))
    return 0


def _solve_a(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return "YES" if has_odd_count(_ints(tokens, n)) else "NO"


def _solve_b(tokens: Iterator[str]) -> str:
    return _show(alternating_prefix(*_ints(tokens, 3)))


_SOLVERS = {"A": _solve_a, "B": _solve_b, "C": _array_solver(mad_sum)}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round960", "Round 960 solutions.", _SOLVERS, argv)