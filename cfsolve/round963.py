"""Solutions for the problems of round 963 (division 2)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from cfsolve.round960 import _array_solver, _ints, _run, _show

_OPTIONS = "ABCD"


def max_correct_answers(n: int, answers: str) -> int:
    """Most correct answers when each of A, B, C and D is right exactly n times."""
    counts = Counter(answers)
    return sum(min(counts[option], n) for option in _OPTIONS)


def min_parity_operations(values: Iterable[int]) -> int:
    """Fewest operations to make every element share one parity."""
    items = sorted(values)
    largest_odd = max((value for value in items if value % 2 == 1), default=1)
    evens = sum(1 for value in items if value % 2 == 0)
    if evens in (0, len(items)):
        return 0
    if items[-1] == largest_odd:
        return evens

    operations = 0
    leftovers = 0
    for value in items:
        if value % 2:
            continue
        if value < largest_odd:
            operations += 1
            largest_odd += value
        else:
            leftovers += 1
    if leftovers:
        operations += 1 + leftovers
    return operations


def earliest_all_on(times: Iterable[int], period: int) -> int | None:
    """Earliest moment every light is on, or None if that never happens."""
    if period <= 0:
        raise ValueError("period must be positive")
    moments = sorted(times)
    if not moments:
        raise ValueError("at least one installation time is required")
    count = len(moments)
    latest = moments[-1]
    cycle = 2 * period

    candidates = list(moments)
    for moment in moments:
        gap = latest - moment
        rounded_up = moment + -(-gap // cycle) * cycle
        rounded_down = moment + gap // cycle * cycle
        if rounded_up > moment:
            candidates.append(rounded_up)
        if rounded_up != rounded_down and rounded_down > moment:
            candidates.append(rounded_down)
    candidates.sort()

    for first, last in zip(candidates, candidates[count - 1:]):
        if last - first < period:
            return last
    return None


def _solve_a(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    answers = ""
    while len(answers) < 4 * n:
        answers += next(tokens)
    return _show(max_correct_answers(n, answers[: 4 * n]))


def _solve_c(tokens: Iterator[str]) -> str:
    n, period = _ints(tokens, 2)
    return _show(earliest_all_on(_ints(tokens, n), period))


_SOLVERS = {"A": _solve_a, "B": _array_solver(min_parity_operations), "C": _solve_c}


def main(argv: list[str] | None = None) -> int:
    """Read test cases for the chosen problem from standard input and print the answers."""
    return _run("round963", "Round 963 solutions.", _SOLVERS, argv)