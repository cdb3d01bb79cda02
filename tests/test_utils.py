# tests/test_utils.py
import pytest

from terrainmaze.maze import Cell, DisjointSet
from terrainmaze.maze.utils import create_all_edges, manhattan, min_manhattan, side_towards, TOP, LEFT


def test_disjoint_set_starts_fully_split():
    sets = DisjointSet(5)

    assert sets.groups == 5
    for i in range(5):
        assert sets.find(i) == i
    assert not sets.is_connected(0, 1)


def test_union_joins_groups_transitively():
    sets = DisjointSet(6)

    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(4, 5) is True

    assert sets.is_connected(0, 2)
    assert sets.is_connected(5, 4)
    assert not sets.is_connected(2, 4)
    assert sets.groups == 3


def test_union_of_connected_ids_reports_false():
    sets = DisjointSet(3)
    sets.union(0, 1)
    sets.union(1, 2)

    assert sets.union(0, 2) is False
    assert sets.groups == 1


def test_long_chain_does_not_recurse():
    n = 50_000
    sets = DisjointSet(n)
    for i in range(n - 1):
        sets.union(i, i + 1)

    assert sets.is_connected(0, n - 1)


@pytest.mark.parametrize("bad", [-1, 4, 100])
def test_disjoint_set_rejects_ids_out_of_range(bad):
    sets = DisjointSet(4)

    with pytest.raises(IndexError):
        sets.find(bad)
    with pytest.raises(IndexError):
        sets.union(0, bad)


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 5), (4, 1), (30, 40)])
def test_create_all_edges_lists_each_adjacency_once(rows, cols):
    edges = create_all_edges(rows, cols)

    assert len(edges) == rows * (cols - 1) + cols * (rows - 1)
    assert len({frozenset(e) for e in edges}) == len(edges)
    for a, b in edges:
        assert manhattan(a, b) == 1


def test_distance_helpers():
    assert manhattan(Cell(0, 0), Cell(3, 4)) == 7
    assert min_manhattan(Cell(2, 2), [Cell(9, 9), Cell(2, 5), Cell(0, 0)]) == 3
    assert side_towards(Cell(1, 1), Cell(0, 1)) == TOP
    assert side_towards(Cell(1, 1), Cell(1, 0)) == LEFT
    assert side_towards(Cell(1, 1), Cell(2, 2)) is None
