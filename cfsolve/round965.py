"""Solutions for the problems of round 965 (division 2)."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, insort
from collections.abc import Callable, Iterable, Iterator
from itertools import islice

_SEARCH_LIMIT = 10**10


def points_with_center(x: int, y: int, k: int) -> list[tuple[int, int]]:
    """Return k distinct integer points whose centre is (x, y)."""
    if k <= 0:
        raise ValueError("k must be positive")
    half = k // 2
    return [
        (x + offset, y + offset)
        for offset in range(-half, half + 1)
        if k % 2 or offset != 0
    ]


def rotate_permutation(permutation: Iterable[int]) -> list[int]:
    """Move the last element of the permutation to the front."""
    items = list(permutation)
    if not items:
        raise ValueError("permutation must not be empty")
    return [items[-1], *items[:-1]]


def _validated(values: Iterable[int], flags: Iterable[int]) -> tuple[list[int], list[bool]]:
    items = list(values)
    marks = list(flags)
    if len(items) != len(marks):
        raise ValueError("values and flags must have the same length")
    if any(mark not in (0, 1) for mark in marks):
        raise ValueError("flags must be 0 or 1")
    return items, [bool(mark) for mark in marks]


def _last_passing(predicate: Callable[[int], bool], low: int, high: int) -> int:
    while low < high:
        middle = (low + high + 1) // 2
        if predicate(middle):
            low = middle
        else:
            high = middle - 1
    return low


def max_median_value(values: Iterable[int], flags: Iterable[int], budget: int) -> int:
    """Largest value reachable by spending budget on the selectable elements."""
    items, marks = _validated(values, flags)
    n = len(items)
    ordered = sorted(zip(items, marks), reverse=True)

    fixed = next((value for value, selectable in ordered if not selectable), 0)
    if fixed == 0:
        return max(
            0,
            max((value for value, selectable in ordered if selectable and value <= budget), default=0),
        )

    def feasible(target: int) -> bool:
        count = 0
        cost = 0
        for value, selectable in ordered:
            if not selectable and value < target:
                continue
            if value < target:
                count += 1
                cost += target - value
            if count >= n // 2:
                return cost <= budget
        return True

    return max(fixed, _last_passing(feasible, 0, _SEARCH_LIMIT))


def _discard(ordered: list[int], value: int) -> bool:
    position = bisect_left(ordered, value)
    if position < len(ordered) and ordered[position] == value:
        del ordered[position]
        return True
    return False


def max_score(values: Iterable[int], flags: Iterable[int], budget: int) -> int:
    """Best score a_i plus the median of the rest, after spending budget on flagged elements."""
    items, marks = _validated(values, flags)
    n = len(items)
    if n < 2:
        raise ValueError("at least two values are required")

    everything = sorted(items)
    split = (n + 1) // 2
    lower, upper = everything[:split], everything[split:]

    best = 0
    for value, selectable in zip(items, marks):
        if not selectable:
            continue
        if not _discard(upper, value):
            _discard(lower, value)
        while len(lower) > len(upper):
            insort(upper, lower.pop())
        while len(upper) > len(lower):
            insort(lower, upper.pop(0))
        best = max(best, budget + value + lower[-1])
        insort(lower, value)
        while upper and lower[-1] > upper[0]:
            insort(upper, lower.pop())

    ordered = sorted(zip(items, marks))
    fixed_index = max(
        (index for index, (_, selectable) in enumerate(ordered) if not selectable),
        default=None,
    )
    if fixed_index is None:
        return best
    fixed_value = ordered.pop(fixed_index)[0]
    half = n // 2

    def feasible(target: int) -> bool:
        chosen = [value for value, selectable in ordered if not selectable and value < target]
        if len(chosen) >= half:
            return False
        chosen += [value for value, selectable in ordered if selectable and value < target]
        if len(chosen) >= half:
            return sum(target - value for value in chosen[half - 1:]) <= budget
        return True

    return max(best, fixed_value + _last_passing(feasible, 0, _SEARCH_LIMIT))


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(token) for token in islice(tokens, count)]


def _solve_a(tokens: Iterator[str]) -> str:
    x, y, k = _ints(tokens, 3)
    return "\n".join(f"{px} {py}" for px, py in points_with_center(x, y, k))


def _solve_b(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return " ".join(map(str, rotate_permutation(_ints(tokens, n))))


def _solve_c(tokens: Iterator[str]) -> str:
    n, budget = _ints(tokens, 2)
    values = _ints(tokens, n)
    flags = _ints(tokens, n)
    return str(max_median_value(values, flags, budget))


def _solve_c1(tokens: Iterator[str]) -> str:
    n, budget = _ints(tokens, 2)
    values = _ints(tokens, n)
    flags = _ints(tokens, n)
    return str(max_score(values, flags, budget))


_SOLVERS = {"A": _solve_a, "B": _solve_b, "C": _solve_c, "C1": _solve_c1}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    parser = argparse.ArgumentParser(prog="round965", description="Round 965 solutions.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    solver = _SOLVERS[args.problem]
    tokens = iter(sys.stdin.read().split())
    for _ in range(int(next(tokens))):
        print(solver(tokens))
    return 0