"""
Utility functions for maze generation and search.

Direction tables, distance helpers, edge enumeration, the disjoint set used
by the Kruskal carve, and a plain reachability walk used for validation.
"""

from collections import deque
from typing import List, Tuple, Set, Iterable
from terrainmaze.config import get_logger
from terrainmaze.maze.cell import Cell


# ============================================================================
# DIRECTION DEFINITIONS
# ============================================================================

# wall side indices into Grid.walls
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3
SIDE_NAMES = ('top', 'right', 'bottom', 'left')

# (side, d_row, d_col) in the order neighbours are reported
DIRECTIONS_4 = [
    (TOP, -1, 0), (RIGHT, 0, 1),
    (BOTTOM, 1, 0), (LEFT, 0, -1)
]

OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, LEFT: RIGHT, RIGHT: LEFT}


def valid_pos(row: int, col: int, rows: int, cols: int) -> bool:
    """Check if position is within grid bounds."""
    return 0 <= row < rows and 0 <= col < cols


def side_towards(a: Cell, b: Cell):
    """
    Return the wall side of `a` that faces `b`, or None if they are not
    grid-adjacent.
    """
    dr = b.row - a.row
    dc = b.col - a.col
    for side, sr, sc in DIRECTIONS_4:
        if (dr, dc) == (sr, sc):
            return side
    return None


# ============================================================================
# DISTANCE CALCULATIONS
# ============================================================================

def manhattan(pos1: Cell, pos2: Cell) -> int:
    """Manhattan (L1) distance between two cells."""
    return abs(pos1.row - pos2.row) + abs(pos1.col - pos2.col)


def min_manhattan(cell: Cell, targets: Iterable[Cell]) -> int:
    """Manhattan distance from `cell` to the nearest of `targets`."""
    return min(manhattan(cell, t) for t in targets)


# ============================================================================
# GRAPH ALGORITHMS
# ============================================================================

class DisjointSet:
    """
    Union-find over integer ids 0..size-1.

    Path halving in `find` and union by size keep trees shallow, so large
    grids never hit recursion limits.
    """

    def __init__(self, size: int):
        self.size = size
        self.parent = list(range(size))
        self.group_size = [1] * size
        self.groups = size
        self.logger = get_logger(__name__)

    def _check(self, x: int):
        if not 0 <= x < self.size:
            self.logger.error(f"Disjoint-set id {x} outside [0, {self.size})")
            raise IndexError(f"id {x} outside [0, {self.size})")

    def find(self, x: int) -> int:
        self._check(x)
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Merge the groups of x and y. Returns False if already joined."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self.group_size[px] < self.group_size[py]:
            px, py = py, px
        self.parent[py] = px
        self.group_size[px] += self.group_size[py]
        self.groups -= 1
        return True

    def is_connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)


def create_all_edges(rows: int, cols: int) -> List[Tuple[Cell, Cell]]:
    """
    Every pair of grid-adjacent cells, each exactly once.

    Returns:
        rows*(cols-1) + cols*(rows-1) edges as (cell, lower-or-right neighbour)
    """
    edges = []
    for r in range(rows):
        for c in range(cols):
            if r < rows - 1:
                edges.append((Cell(r, c), Cell(r + 1, c)))
            if c < cols - 1:
                edges.append((Cell(r, c), Cell(r, c + 1)))
    return edges


# ============================================================================
# REACHABILITY
# ============================================================================

def bfs_reachable(grid, start: Cell) -> Set[Cell]:
    """
    Breadth-First Search to find all cells reachable from start through
    open walls.
    """
    reachable = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in grid.get_accessible_neighbors(current):
            if neighbor in reachable:
                continue
            reachable.add(neighbor)
            queue.append(neighbor)

    return reachable
