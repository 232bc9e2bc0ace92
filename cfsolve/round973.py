"""Solutions for the problems of round 973 (division 2)."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from cfsolve.round960 import _array_solver, _ints, _run, _show


def min_blend_time(n: int, x: int, y: int) -> int:
    """Seconds needed to blend n fruits at the slower of the two rates x and y."""
    if n < 0:
        raise ValueError("fruit count must not be negative")
    if x <= 0 or y <= 0:
        raise ValueError("rates must be positive")
    return -(-n // min(x, y))


def last_fighter_rating(ratings: Iterable[int]) -> int:
    """Highest rating the last remaining fighter can keep."""
    items = list(ratings)
    if not items:
        raise ValueError("at least one fighter is required")
    if len(items) == 1:
        return items[0]
    return items[-1] - (items[-2] - sum(items[:-2]))


def _search(predicate: Callable[[int], bool], low: int, high: int, default: int, lowest: bool) -> int:
    """Binary search for the lowest (or highest) value passing a monotone predicate."""
    best = default
    pick = min if lowest else max
    while low <= high:
        middle = (low + high) // 2
        if predicate(middle):
            best = pick(best, middle)
            if lowest:
                high = middle - 1
            else:
                low = middle + 1
        elif lowest:
            low = middle + 1
        else:
            high = middle - 1
    return best


def min_max_difference(values: Iterable[int]) -> int:
    """Smallest max minus min reachable by moving units one step to the right."""
    items = list(values)
    largest = max(0, *items) if items else 0

    def fits_under(ceiling: int) -> bool:
        surplus = 0
        for value in items:
            if value >= ceiling:
                surplus += value - ceiling
            elif surplus > 0:
                surplus = max(0, surplus + value - ceiling)
        return surplus == 0

    top = _search(fits_under, 0, largest, largest, lowest=True)

    levelled = []
    carry = 0
    for value in items:
        if value >= top:
            carry += value - top
            levelled.append(top)
        elif carry >= top - value:
            carry -= top - value
            levelled.append(top)
        else:
            levelled.append(value + carry)
            carry = 0

    def reaches(floor: int) -> bool:
        deficit = 0
        for value in reversed(levelled):
            if value <= floor:
                deficit += floor - value
            else:
                deficit = max(0, deficit - (value - floor))
        return deficit == 0

    bottom = _search(reaches, 0, top, 0, lowest=False)
    return top - bottom


def _solve_a(tokens: Iterator[str]) -> str:
    return _show(min_blend_time(*_ints(tokens, 3)))


_SOLVERS = {
    "A": _solve_a,
    "B": _array_solver(last_fighter_rating),
    "D": _array_solver(min_max_difference),
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round973", "Round 973 solutions.", _SOLVERS, argv)