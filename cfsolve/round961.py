"""Solutions for the problems of round 961 (division 2)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import pairwise, zip_longest

from cfsolve.round960 import _array_solver, _ints, _run, _show


def min_occupied_diagonals(n: int, k: int) -> int:
    """Fewest diagonals occupied when placing k chips on an n by n board."""
    if k < 0 or k > n * n:
        raise ValueError("chip count must lie between 0 and n*n")
    if k <= n:
        return min(k, 1)
    answer = 1
    k -= n
    n -= 1
    while k > 0:
        k -= n
        answer += 1
        if k <= 0:
            break
        k -= n
        answer += 1
        n -= 1
    return answer


def _check_petals(petals: Iterable[int]) -> None:
    if any(value <= 0 for value in petals):
        raise ValueError("petal counts must be positive")


def max_bouquet(petals: Iterable[int], coins: int) -> int:
    """Most petals in a bouquet of flowers whose petal counts differ by at most one."""
    counts = Counter(petals)
    _check_petals(counts)
    distinct = sorted(counts)
    best = 0
    for value, following in zip_longest(distinct, distinct[1:]):
        if following == value + 1:
            available = counts[following]
            option = 0
            for taken in range(counts[value] + 1):
                spent = taken * value
                if spent <= coins:
                    extra = min((coins - spent) // following, available)
                    option = max(option, spent + extra * following)
            best = max(best, option)
        else:
            total = value * counts[value]
            best = max(best, total if total <= coins else coins // value * value)
    return best


def max_bouquet_counted(petals: Iterable[int], quantities: Iterable[int], coins: int) -> int:
    """Like max_bouquet, but each distinct petal count comes with a stock quantity."""
    petal_list = list(petals)
    quantity_list = list(quantities)
    if len(petal_list) != len(quantity_list):
        raise ValueError("petals and quantities must have the same length")
    _check_petals(petal_list)
    stock = dict(zip(petal_list, quantity_list))
    best = 0
    for value in sorted(stock):
        quantity = stock[value]
        lower = value - 1
        if lower in stock:
            lower_taken = min(coins // lower, stock[lower])
            left = coins - lower_taken * lower
            upper_taken = min(left // value, quantity)
            left -= upper_taken * value
            left = max(0, left - min(lower_taken, quantity - upper_taken))
            best = max(best, coins - left)
        best = max(best, min(quantity, coins // value) * value)
    return best


def min_squarings(values: Iterable[int]) -> int | None:
    """Fewest squarings making the sequence non-decreasing, or None if impossible."""
    items = list(values)
    if any(value <= 0 for value in items):
        raise ValueError("values must be positive")
    total = 0
    pending = 0
    for previous, current in pairwise(items):
        if current < previous:
            if current == 1:
                return None
            steps = 0
            power = current
            while power < previous:
                power *= power
                steps += 1
            pending += steps
        elif previous != 1:
            steps = 0
            power = previous
            while power <= current:
                power *= power
                steps += 1
            pending = max(0, pending - (steps - 1))
        total += pending
    return total


def _solve_a(tokens: Iterator[str]) -> str:
    return _show(min_occupied_diagonals(*_ints(tokens, 2)))


def _solve_b1(tokens: Iterator[str]) -> str:
    n, coins = _ints(tokens, 2)
    return _show(max_bouquet(_ints(tokens, n), coins))


def _solve_b2(tokens: Iterator[str]) -> str:
    n, coins = _ints(tokens, 2)
    petals = _ints(tokens, n)
    return _show(max_bouquet_counted(petals, _ints(tokens, n), coins))


_SOLVERS = {
    "A": _solve_a,
    "B1": _solve_b1,
    "B2": _solve_b2,
    "C": _array_solver(min_squarings),
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round961", "Round 961 solutions.", _SOLVERS, argv)