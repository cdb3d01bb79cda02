"""
Grid model: wall state and terrain for a rows x cols maze.

Cells are plain (row, col) values. Their mutable state lives in two flat
numpy arrays indexed by the row-major offset row*cols + col:

    walls    bool  (rows*cols, 4)  top/right/bottom/left, True = wall present
    terrain  int8  (rows*cols,)    code into terrain.ALL_TERRAIN_TYPES

A new grid has every wall closed and Default terrain everywhere. Only the
maze generator (or a test building a grid by hand) mutates it.
"""

from typing import Dict, Iterator, List
import numpy as np
from terrainmaze.config import get_logger
from terrainmaze.maze.cell import Cell
from terrainmaze.maze.terrain import ALL_TERRAIN_TYPES, PENALTY_TABLE, Terrain, terrain_from_code
from terrainmaze.maze.utils import (
    DIRECTIONS_4, OPPOSITE, SIDE_NAMES, TOP, RIGHT, BOTTOM, LEFT, side_towards, valid_pos
)


class Grid:
    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            get_logger(__name__).error(f"Invalid grid size {rows}x{cols}")
            raise ValueError("rows and cols must be positive")

        self.rows = rows
        self.cols = cols
        self.walls = np.ones((rows * cols, 4), dtype=bool)
        self.terrain = np.zeros(rows * cols, dtype=np.int8)

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols}, open={self.count_open_adjacencies()})"

    # -------------------------
    # Addressing
    # -------------------------
    def in_bounds(self, cell: Cell) -> bool:
        return valid_pos(cell.row, cell.col, self.rows, self.cols)

    def check_cell(self, cell: Cell):
        """Raise IndexError if `cell` lies outside the grid."""
        if not self.in_bounds(cell):
            get_logger(__name__).error(f"{cell} is outside the {self.rows}x{self.cols} grid")
            raise IndexError(f"{cell} is outside the {self.rows}x{self.cols} grid")

    def cell(self, row: int, col: int) -> Cell:
        c = Cell(row, col)
        self.check_cell(c)
        return c

    def index_of(self, cell: Cell) -> int:
        """Row-major offset of `cell` into the arrays. Raises IndexError off the grid."""
        self.check_cell(cell)
        return cell.index(self.cols)

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield Cell(r, c)

    # -------------------------
    # Walls
    # -------------------------
    def has_wall(self, cell: Cell, side: int) -> bool:
        return bool(self.walls[self.index_of(cell), side])

    def get_walls(self, cell: Cell) -> Dict[str, bool]:
        flags = self.walls[self.index_of(cell)]
        return {name: bool(flags[side]) for side, name in enumerate(SIDE_NAMES)}

    def has_top_wall(self, cell: Cell) -> bool:
        return self.has_wall(cell, TOP)

    def has_right_wall(self, cell: Cell) -> bool:
        return self.has_wall(cell, RIGHT)

    def has_bottom_wall(self, cell: Cell) -> bool:
        return self.has_wall(cell, BOTTOM)

    def has_left_wall(self, cell: Cell) -> bool:
        return self.has_wall(cell, LEFT)

    def remove_wall_between(self, a: Cell, b: Cell) -> bool:
        """
        Clear the pair of walls separating two grid-adjacent cells.

        Non-adjacent cells are left untouched.

        Returns:
            True if a and b were adjacent (flags cleared), False otherwise
        """
        side = side_towards(a, b)
        if side is None or not self.in_bounds(a) or not self.in_bounds(b):
            return False
        self.walls[self.index_of(a), side] = False
        self.walls[self.index_of(b), OPPOSITE[side]] = False
        return True

    def get_accessible_neighbors(self, cell: Cell) -> List[Cell]:
        """
        Neighbours reachable from `cell` in one step, in the order
        top, right, bottom, left. Out-of-bounds or walled directions are
        omitted.
        """
        flags = self.walls[self.index_of(cell)]
        neighbors = []
        for side, dr, dc in DIRECTIONS_4:
            if flags[side]:
                continue
            nr, nc = cell.row + dr, cell.col + dc
            if valid_pos(nr, nc, self.rows, self.cols):
                neighbors.append(Cell(nr, nc))
        return neighbors

    def count_open_adjacencies(self) -> int:
        """Number of open walls between in-grid neighbours (each counted once)."""
        walls = self.walls.reshape(self.rows, self.cols, 4)
        open_right = np.count_nonzero(~walls[:, :-1, RIGHT])
        open_bottom = np.count_nonzero(~walls[:-1, :, BOTTOM])
        return int(open_right + open_bottom)

    def count_dead_ends(self) -> int:
        """Cells with exactly one open side."""
        open_sides = np.count_nonzero(~self.walls, axis=1)
        return int(np.count_nonzero(open_sides == 1))

    # -------------------------
    # Terrain
    # -------------------------
    def get_terrain(self, cell: Cell) -> Terrain:
        return terrain_from_code(self.terrain[self.index_of(cell)])

    def set_terrain(self, cell: Cell, terrain: Terrain):
        self.terrain[self.index_of(cell)] = terrain.code

    def get_penalty(self, cell: Cell) -> int:
        return int(PENALTY_TABLE[self.terrain[self.index_of(cell)]])

    def get_path_penalty(self, path: List[Cell]) -> int:
        """Sum of entering penalties over every cell of `path`."""
        if not path:
            return 0
        indices = np.fromiter((self.index_of(c) for c in path), dtype=np.int64, count=len(path))
        return int(PENALTY_TABLE[self.terrain[indices]].sum())

    def get_terrain_counts(self) -> Dict[str, int]:
        counts = np.bincount(self.terrain, minlength=len(ALL_TERRAIN_TYPES))
        return {t.name: int(counts[t.code]) for t in ALL_TERRAIN_TYPES}
