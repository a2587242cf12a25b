import random

import pytest

from puzzlekit.islands import DisjointSet, largest_island, largest_island_bfs


def test_disjoint_set_starts_separate():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert all(sets.size_of(i) == 1 for i in range(4))


def test_disjoint_set_unite_merges_sizes():
    sets = DisjointSet(6)
    sets.unite(0, 1)
    sets.unite(2, 3)
    sets.unite(1, 3)
    assert sets.find(0) == sets.find(2)
    assert sets.size_of(3) == 4
    assert sets.find(4) != sets.find(0)
    assert sets.size_of(5) == 1


def test_disjoint_set_unite_same_set_is_noop():
    sets = DisjointSet(3)
    sets.unite(0, 1)
    sets.unite(1, 0)
    assert sets.size_of(0) == 2


def test_disjoint_set_long_chain():
    n = 5000
    sets = DisjointSet(n)
    for i in range(n - 1):
        sets.unite(i, i + 1)
    assert sets.size_of(0) == n
    assert len({sets.find(i) for i in range(n)}) == 1


def test_disjoint_set_bad_index():
    with pytest.raises(IndexError):
        DisjointSet(2).find(5)


@pytest.mark.parametrize("fn", [largest_island, largest_island_bfs])
def test_diagonal_pair_joins(fn):
    assert fn([[1, 0], [0, 1]]) == 3


@pytest.mark.parametrize("fn", [largest_island, largest_island_bfs])
@pytest.mark.parametrize("n", [1, 2, 4])
def test_all_land_is_whole_grid(fn, n):
    assert fn([[1] * n for _ in range(n)]) == n * n


@pytest.mark.parametrize("fn", [largest_island, largest_island_bfs])
def test_one_water_cell_fills_grid(fn):
    assert fn([[1, 1], [1, 0]]) == 4


@pytest.mark.parametrize("fn", [largest_island, largest_island_bfs])
@pytest.mark.parametrize("n", [1, 3])
def test_all_water_gives_single_cell(fn, n):
    assert fn([[0] * n for _ in range(n)]) == 1


def test_methods_agree_on_random_grids():
    rng = random.Random(13)
    for _ in range(60):
        n = rng.randint(1, 7)
        grid = [[int(rng.random() < 0.5) for _ in range(n)] for _ in range(n)]
        result = largest_island(grid)
        assert result == largest_island_bfs(grid)
        land = sum(map(sum, grid))
        assert result <= min(n * n, land + 1)
        assert result >= 1


def test_input_grid_untouched():
    grid = [[1, 0, 1], [0, 0, 0], [1, 0, 1]]
    snapshot = [row[:] for row in grid]
    largest_island(grid)
    largest_island_bfs(grid)
    assert grid == snapshot