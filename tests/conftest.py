# tests/conftest.py
import pytest

from terrainmaze.maze import Cell, Grid, MazeConfig, MazeGenerator


def _open_all(grid):
    for r in range(grid.rows):
        for c in range(grid.cols):
            if r + 1 < grid.rows:
                grid.remove_wall_between(Cell(r, c), Cell(r + 1, c))
            if c + 1 < grid.cols:
                grid.remove_wall_between(Cell(r, c), Cell(r, c + 1))
    return grid


@pytest.fixture
def open_grid():
    """Factory: grid with every internal wall removed (full connectivity, loops)."""
    def make(rows, cols, terrain=None):
        grid = _open_all(Grid(rows, cols))
        for (r, c), kind in (terrain or {}).items():
            grid.set_terrain(Cell(r, c), kind)
        return grid
    return make


@pytest.fixture
def generated_maze():
    """Factory: (generator, grid, destinations) for a seeded maze."""
    def make(rows=30, cols=40, seed=0):
        generator = MazeGenerator(MazeConfig(rows=rows, cols=cols, seed=seed))
        grid, destinations = generator.generate()
        return generator, grid, destinations
    return make
