# tests/test_maze_generation.py
import random

import numpy as np
import pytest

from terrainmaze.config import MAZE_ROWS, MAZE_COLS
from terrainmaze.maze import Cell, ORIGIN, MazeConfig, MazeGenerator, default, grass, generate
from terrainmaze.maze.utils import bfs_reachable, create_all_edges


def _count_simple_paths(grid, start, goal):
    """Enumerate simple paths through open walls (small grids only)."""
    count = 0
    stack = [(start, {start})]
    while stack:
        cell, seen = stack.pop()
        if cell == goal:
            count += 1
            continue
        for nxt in grid.get_accessible_neighbors(cell):
            if nxt not in seen:
                stack.append((nxt, seen | {nxt}))
    return count


@pytest.mark.parametrize("rows, cols, seed", [
    (MAZE_ROWS, MAZE_COLS, 0),
    (MAZE_ROWS, MAZE_COLS, 7),
    (6, 9, 1),
    (1, 12, 2),
    (12, 1, 3),
])
def test_maze_is_a_spanning_tree(generated_maze, rows, cols, seed):
    _, grid, _ = generated_maze(rows, cols, seed)

    assert grid.count_open_adjacencies() == rows * cols - 1
    assert len(bfs_reachable(grid, ORIGIN)) == rows * cols


def test_maze_has_exactly_one_simple_path_between_cells(generated_maze):
    _, grid, _ = generated_maze(6, 7, seed=11)
    rng = random.Random(5)
    cells = list(grid.cells())

    for _ in range(20):
        a, b = rng.sample(cells, 2)
        assert _count_simple_paths(grid, a, b) == 1


def test_walls_are_symmetric(generated_maze):
    _, grid, _ = generated_maze(seed=3)

    for a, b in create_all_edges(grid.rows, grid.cols):
        a_open = b in grid.get_accessible_neighbors(a)
        b_open = a in grid.get_accessible_neighbors(b)
        assert a_open == b_open


def test_outer_boundary_stays_closed(generated_maze):
    _, grid, _ = generated_maze(seed=4)

    for c in range(grid.cols):
        assert grid.has_top_wall(Cell(0, c))
        assert grid.has_bottom_wall(Cell(grid.rows - 1, c))
    for r in range(grid.rows):
        assert grid.has_left_wall(Cell(r, 0))
        assert grid.has_right_wall(Cell(r, grid.cols - 1))


@pytest.mark.parametrize("seed", range(25))
def test_destination_constraints(generated_maze, seed):
    _, grid, destinations = generated_maze(seed=seed)

    assert len(destinations) == 3
    assert len(set(destinations)) == 3
    reachable = bfs_reachable(grid, ORIGIN)
    for dest in destinations:
        assert dest != ORIGIN
        assert not (dest.row < 5 and dest.col < 5)
        assert grid.in_bounds(dest)
        assert dest in reachable


def test_origin_is_always_default_terrain(generated_maze):
    for seed in range(10):
        _, grid, _ = generated_maze(seed=seed)
        assert grid.get_terrain(ORIGIN) is default


def test_terrain_thresholds_drive_the_roll():
    config = MazeConfig(rows=6, cols=6, seed=1, grass_threshold=100, mud_threshold=100, water_threshold=100)
    grid, _ = MazeGenerator(config).generate()

    counts = grid.get_terrain_counts()
    assert counts["Grass"] == 35
    assert counts["Default"] == 1
    assert grid.get_terrain(Cell(5, 5)) is grass


def test_default_terrain_mix_is_roughly_seventy_percent_plain(generated_maze):
    _, grid, _ = generated_maze(seed=21)

    counts = grid.get_terrain_counts()
    total = grid.rows * grid.cols
    assert sum(counts.values()) == total
    assert 0.6 < counts["Default"] / total < 0.8
    for name in ("Grass", "Mud", "Water"):
        assert 0.05 < counts[name] / total < 0.15


def test_same_seed_reproduces_the_maze(generated_maze):
    _, grid_a, dest_a = generated_maze(seed=99)
    _, grid_b, dest_b = generated_maze(seed=99)
    _, grid_c, _ = generated_maze(seed=100)

    assert np.array_equal(grid_a.walls, grid_b.walls)
    assert np.array_equal(grid_a.terrain, grid_b.terrain)
    assert dest_a == dest_b
    assert not np.array_equal(grid_a.walls, grid_c.walls)


def test_injected_random_source_is_used():
    config = MazeConfig(rows=8, cols=8)
    grid_a, dest_a = MazeGenerator(config, rng=random.Random(42)).generate()
    grid_b, dest_b = MazeGenerator(config, rng=random.Random(42)).generate()

    assert np.array_equal(grid_a.walls, grid_b.walls)
    assert dest_a == dest_b


def test_reset_discards_previous_maze():
    generator = MazeGenerator(MazeConfig(rows=10, cols=10, seed=8))
    first_grid, first_dest = generator.generate()
    first_walls = first_grid.walls.copy()

    second_grid, second_dest = generator.reset()

    assert second_grid is not first_grid
    assert generator.get_grid() is second_grid
    assert generator.get_destinations() == second_dest
    assert len(second_dest) == 3
    assert second_grid.count_open_adjacencies() == 99
    assert not np.array_equal(first_walls, second_grid.walls)
    # the old grid object is left untouched
    assert np.array_equal(first_grid.walls, first_walls)


def test_reset_sequence_is_reproducible_with_a_seed():
    gen_a = MazeGenerator(MazeConfig(rows=10, cols=10, seed=8))
    gen_b = MazeGenerator(MazeConfig(rows=10, cols=10, seed=8))
    gen_a.generate()
    gen_b.generate()

    grid_a, dest_a = gen_a.reset()
    grid_b, dest_b = gen_b.reset()

    assert np.array_equal(grid_a.walls, grid_b.walls)
    assert dest_a == dest_b


@pytest.mark.parametrize("rows, cols", [(5, 5), (2, 3), (4, 5)])
def test_grid_too_small_for_destinations_fails_fast(rows, cols):
    generator = MazeGenerator(MazeConfig(rows=rows, cols=cols, seed=0))

    with pytest.raises(ValueError):
        generator.generate()


def test_smallest_viable_grid_finds_all_destinations():
    # 1x8: only columns 5..7 are outside the start zone
    _, destinations = generate(1, 8, seed=3)

    assert sorted(destinations) == [Cell(0, 5), Cell(0, 6), Cell(0, 7)]


def test_destination_retry_cap():
    generator = MazeGenerator(MazeConfig(rows=1, cols=8, seed=3, max_destination_attempts=1))

    with pytest.raises(RuntimeError):
        generator.generate()


def test_statistics_describe_the_maze(generated_maze):
    generator, grid, destinations = generated_maze(rows=10, cols=12, seed=2)

    stats = generator.get_statistics()
    assert stats["rows"] == 10
    assert stats["cols"] == 12
    assert stats["open_adjacencies"] == 119
    assert stats["dead_ends"] > 0
    assert sum(stats["terrain"].values()) == 120
    assert stats["destinations"] == destinations
    assert stats["generations"] == 1


def test_statistics_empty_before_generation():
    assert MazeGenerator(MazeConfig(rows=10, cols=10, seed=1)).get_statistics() == {}


@pytest.mark.parametrize("kwargs", [
    {"rows": 0},
    {"cols": -3},
    {"destination_count": 0},
    {"exclusion_zone": 0},
    {"max_destination_attempts": 0},
    {"grass_threshold": 40, "mud_threshold": 20},
    {"water_threshold": 101},
])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        MazeConfig(**kwargs)


def test_default_config_matches_window_size():
    config = MazeConfig()

    assert (config.rows, config.cols) == (30, 40)
    assert config.edge_count == 30 * 39 + 40 * 29
    assert config.eligible_destination_count == 1200 - 25
