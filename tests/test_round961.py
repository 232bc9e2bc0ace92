import io

import pytest

from cfsolve.round961 import (
    main,
    max_bouquet,
    max_bouquet_counted,
    min_occupied_diagonals,
    min_squarings,
)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main(argv)
    return capsys.readouterr().out.splitlines()


def _expand(petals, quantities):
    return [p for p, q in zip(petals, quantities) for _ in range(q)]


@pytest.mark.parametrize("n", [1, 3, 10])
def test_no_chips_no_diagonals(n):
    assert min_occupied_diagonals(n, 0) == 0


@pytest.mark.parametrize("n", [1, 3, 10])
def test_up_to_n_chips_fit_one_diagonal(n):
    assert all(min_occupied_diagonals(n, k) == 1 for k in range(1, n + 1))


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_full_board_uses_every_diagonal(n):
    assert min_occupied_diagonals(n, n * n) == 2 * n - 1


def test_diagonals_grow_by_at_most_one():
    results = [min_occupied_diagonals(4, k) for k in range(17)]
    steps = [b - a for a, b in zip(results, results[1:])]
    assert all(step in (0, 1) for step in steps)


@pytest.mark.parametrize("k", [-1, 10])
def test_diagonals_reject_bad_chip_count(k):
    with pytest.raises(ValueError):
        min_occupied_diagonals(3, k)


def test_max_bouquet_example():
    assert max_bouquet([1, 1, 2, 2, 3], 10) == 7


@pytest.mark.parametrize(
    "petals,coins",
    [([1, 1, 2, 2, 3], 10), ([4, 2, 7, 5, 6, 1, 1, 1], 20), ([9], 4), ([2, 5, 9], 100)],
)
def test_max_bouquet_bounds(petals, coins):
    result = max_bouquet(petals, coins)
    assert 0 <= result <= coins
    assert result <= sum(petals)


def test_max_bouquet_takes_everything_when_rich():
    petals = [3, 3, 4, 4]
    assert max_bouquet(petals, 100) == sum(petals)


def test_max_bouquet_rejects_zero_petals():
    with pytest.raises(ValueError):
        max_bouquet([0, 1], 5)


def test_max_bouquet_counted_example():
    assert max_bouquet_counted([1, 2, 3], [2, 2, 1], 10) == 7


@pytest.mark.parametrize(
    "petals,quantities,coins",
    [
        ([1, 2, 3], [2, 2, 1], 10),
        ([4, 2, 7, 5, 6, 1], [1, 1, 1, 1, 1, 3], 20),
        ([2, 3], [5, 5], 13),
        ([10, 11, 30], [3, 2, 4], 100),
        ([1], [7], 3),
        ([5, 6, 8, 9], [2, 3, 1, 4], 41),
    ],
)
def test_counted_agrees_with_expanded(petals, quantities, coins):
    expanded = _expand(petals, quantities)
    assert max_bouquet_counted(petals, quantities, coins) == max_bouquet(expanded, coins)


def test_counted_rejects_length_mismatch():
    with pytest.raises(ValueError):
        max_bouquet_counted([1, 2], [1], 5)


def test_min_squarings_example():
    assert min_squarings([4, 3, 2]) == 3


@pytest.mark.parametrize("values", [[1, 2, 3], [5], [2, 2, 2], [1, 1, 9]])
def test_min_squarings_sorted_needs_none(values):
    assert min_squarings(values) == 0


@pytest.mark.parametrize("values", [[3, 1, 5], [2, 1]])
def test_min_squarings_impossible(values):
    assert min_squarings(values) is None


def test_min_squarings_rejects_zero():
    with pytest.raises(ValueError):
        min_squarings([2, 0])


def test_main_a(monkeypatch, capsys):
    cases = [(1, 0), (2, 4), (3, 9), (10, 50)]
    text = f"{len(cases)}\n" + "".join(f"{n} {k}\n" for n, k in cases)
    expected = [str(min_occupied_diagonals(n, k)) for n, k in cases]
    assert _run(monkeypatch, capsys, ["A"], text) == expected


def test_main_b1(monkeypatch, capsys):
    cases = [([1, 1, 2, 2, 3], 10), ([4, 2, 7, 5, 6, 1, 1, 1], 20)]
    text = f"{len(cases)}\n" + "".join(
        f"{len(p)} {m}\n{' '.join(map(str, p))}\n" for p, m in cases
    )
    expected = [str(max_bouquet(p, m)) for p, m in cases]
    assert _run(monkeypatch, capsys, ["B1"], text) == expected


def test_main_b2(monkeypatch, capsys):
    cases = [([1, 2, 3], [2, 2, 1], 10), ([10, 11, 30], [3, 2, 4], 100)]
    text = f"{len(cases)}\n" + "".join(
        f"{len(p)} {m}\n{' '.join(map(str, p))}\n{' '.join(map(str, q))}\n"
        for p, q, m in cases
    )
    expected = [str(max_bouquet_counted(p, q, m)) for p, q, m in cases]
    assert _run(monkeypatch, capsys, ["B2"], text) == expected


def test_main_c_prints_minus_one_when_impossible(monkeypatch, capsys):
    cases = [[4, 3, 2], [3, 1, 5]]
    text = f"{len(cases)}\n" + "".join(f"{len(c)}\n{' '.join(map(str, c))}\n" for c in cases)
    assert _run(monkeypatch, capsys, ["C"], text) == [str(min_squarings(cases[0])), "-1"]