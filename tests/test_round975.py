import io

import pytest

from cfsolve.round975 import (
    count_good_starts,
    main,
    max_deck_size,
    max_plus_size,
    points_in_segments,
)


def test_plus_size_sample():
    assert max_plus_size([5, 4, 5]) == 7


@pytest.mark.parametrize(
    "values", [[1], [4, 5, 4], [3, 3, 3, 3, 4, 1, 2, 3, 4, 5], [17, 89, 92, 42, 29, 92, 14, 70, 45]]
)
def test_plus_size_bounds(values):
    n = len(values)
    result = max_plus_size(values)
    assert max(values) + n // 2 <= result <= max(values) + (n + 1) // 2


def test_segments_sample():
    assert points_in_segments([101, 200], [2, 1]) == [0, 100]


@pytest.mark.parametrize("points", [[1, 2], [101, 200], [1, 2, 3, 5, 6, 7], [3, 10, 11, 40]])
def test_segment_counts_cover_every_point_once(points):
    n = len(points)
    counts = points_in_segments(points, range(n * n + n))
    assert sum(counts) == points[-1] - points[0] + 1
    assert all(count >= 0 for count in counts)


def test_deck_sample():
    assert max_deck_size([3, 2, 2], 1) == 2


@pytest.mark.parametrize(
    "counts", [[3, 2, 2], [2, 6, 1, 2, 4], [7, 4, 6, 6, 9, 3, 10, 2, 8, 7], [0, 1], [1, 0]]
)
def test_deck_size_bounded_and_monotone(counts):
    sizes = [max_deck_size(counts, coins) for coins in range(12)]
    assert all(1 <= size <= len(counts) for size in sizes)
    assert sizes == sorted(sizes)


def test_deck_rejects_negative_coins():
    with pytest.raises(ValueError):
        max_deck_size([1, 2], -1)


@pytest.mark.parametrize("deadline", [0, 1, 2, 5])
def test_single_city_is_good_iff_deadline_reached(deadline):
    assert count_good_starts([deadline]) == int(deadline >= 1)


@pytest.mark.parametrize(
    "deadlines", [[6, 3, 3, 3, 5, 5], [5, 6, 4, 1, 4, 5], [8, 6, 4, 2, 1, 3, 5, 7, 9], [2, 3, 1]]
)
def test_good_starts_bounded_and_monotone(deadlines):
    result = count_good_starts(deadlines)
    raised = count_good_starts([deadline + 3 for deadline in deadlines])
    assert 0 <= result <= len(deadlines)
    assert result <= raised <= len(deadlines)


def test_main_outputs_match_functions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2 2\n101 200\n2 1\n"))
    assert main(["B"]) == 0
    assert capsys.readouterr().out.split() == [
        str(count) for count in points_in_segments([101, 200], [2, 1])
    ]

    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 1\n3 2 2\n5 4\n2 6 1 2 4\n"))
    main(["C"])
    assert capsys.readouterr().out.split() == [
        str(max_deck_size([3, 2, 2], 1)),
        str(max_deck_size([2, 6, 1, 2, 4], 4)),
    ]

    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n5 4 5\n"))
    main(["A"])
    assert capsys.readouterr().out.strip() == str(max_plus_size([5, 4, 5]))

    monkeypatch.setattr("sys.stdin", io.StringIO("1\n6\n6 3 3 3 5 5\n"))
    main(["D"])
    assert capsys.readouterr().out.strip() == str(count_good_starts([6, 3, 3, 3, 5, 5]))