"""Solutions for the problems of round 975 (division 2)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import pairwise

from cfsolve.round960 import _array_solver, _ints, _run, _show


def max_plus_size(values: Iterable[int]) -> int:
    """Best maximum red element plus red count with no two adjacent red elements."""
    items = list(values)
    n = len(items)
    even_best = max([0, *items[1::2]])
    odd_best = max([0, *items[0::2]])
    return max(even_best + n // 2, odd_best + n // 2 + n % 2)


def points_in_segments(points: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query k, count integer points lying in exactly k of the pairwise segments."""
    items = list(points)
    n = len(items)
    tally: Counter[int] = Counter()
    for index, (previous, current) in enumerate(pairwise(items), start=1):
        tally[index * (n - index)] += current - previous - 1
    for index in range(n):
        tally[index * (n - index - 1) + n - 1] += 1
    return [tally.get(query, 0) for query in queries]


def max_deck_size(counts: Iterable[int], coins: int) -> int:
    """Largest deck size after buying up to coins extra cards."""
    if coins < 0:
        raise ValueError("coins must not be negative")
    items = list(counts)
    total = sum(items)
    largest = max([0, *items])
    best = 1
    for size in range(1, len(items) + 1):
        missing = (size - total % size) % size
        if missing > coins:
            continue
        reachable = total + coins - (coins - missing) % size
        if reachable // size >= largest:
            best = max(best, size)
    return best


def count_good_starts(deadlines: Iterable[int]) -> int:
    """Number of starting cities from which every deadline can be met."""
    items = list(deadlines)
    n = len(items)

    right = []
    bound = n + 2
    for deadline in reversed(items):
        bound = min(n + 1, deadline, bound - 1)
        right.append(bound)
    right.reverse()

    left = [0]
    for deadline in items[:-1]:
        left.append(min(max(0, left[-1] + 1), deadline))

    return sum(
        1
        for start, (reach_right, reach_left) in enumerate(zip(right, left))
        if reach_right >= n and (reach_left == 0 or reach_left <= start + 1)
    )


def _solve_b(tokens: Iterator[str]) -> str:
    n, q = _ints(tokens, 2)
    points = _ints(tokens, n)
    return _show(points_in_segments(points, _ints(tokens, q)))


def _solve_c(tokens: Iterator[str]) -> str:
    n, coins = _ints(tokens, 2)
    return _show(max_deck_size(_ints(tokens, n), coins))


_SOLVERS = {
    "A": _array_solver(max_plus_size),
    "B": _solve_b,
    "C": _solve_c,
    "D": _array_solver(count_good_starts),
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round975", "Round 975 solutions.", _SOLVERS, argv)