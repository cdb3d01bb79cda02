"""
Maze Package - Perfect Maze Generation and Multi-Target Search

This package builds a random perfect maze over a rectangular grid with
terrain, and searches it from the top-left cell to the first of several
finish cells.

MODULES:
--------
config.py
    MazeConfig dataclass with all generation parameters.

terrain.py
    Terrain kinds (Default, Grass, Mud, Water) with entering penalty and
    display colour.

cell.py
    Immutable (row, col) cell value.

grid.py
    Grid of wall flags and terrain codes in flat numpy arrays; adjacency.

utils.py
    Direction tables, Manhattan helpers, edge enumeration, DisjointSet,
    reachability walk.

mazeGen.py
    MazeGenerator: randomized Kruskal spanning tree, terrain roll,
    destination selection, reset.

solver.py
    MazeSolver: BFS, DFS, Dijkstra and A* with a shared result contract,
    plus path reconstruction.

USAGE:
------
```python
from terrainmaze.maze import MazeConfig, MazeGenerator, MazeSolver

generator = MazeGenerator(MazeConfig(rows=30, cols=40, seed=12345))
grid, destinations = generator.generate()

solver = MazeSolver(grid)
result = solver.solve("Dijkstra", generator.get_start(), destinations)
path, cost = solver.reconstruct_path(result.parent, result.reached_target)
print(f"Reached {result.reached_target} with penalty {cost}")
```

INVARIANTS:
-----------
- Open walls form a spanning tree: rows*cols-1 passages, no cycles.
- Walls are symmetric between neighbours.
- Every destination is reachable from the origin.
- Visited state is cleared at the start of every search.
"""

from terrainmaze.maze.config import MazeConfig
from terrainmaze.maze.cell import Cell, ORIGIN
from terrainmaze.maze.grid import Grid
from terrainmaze.maze.mazeGen import MazeGenerator, generate
from terrainmaze.maze.solver import (
    MazeSolver, SolveResult, reconstruct_path,
    BFS, DFS, DIJKSTRA, ASTAR, STRATEGIES
)
from terrainmaze.maze.terrain import (
    Terrain, default, grass, mud, water, ALL_TERRAIN_TYPES
)
from terrainmaze.maze.utils import DisjointSet

__all__ = [
    # Configuration
    'MazeConfig',

    # Model
    'Cell',
    'ORIGIN',
    'Grid',
    'DisjointSet',

    # Generator
    'MazeGenerator',
    'generate',

    # Search
    'MazeSolver',
    'SolveResult',
    'reconstruct_path',
    'BFS',
    'DFS',
    'DIJKSTRA',
    'ASTAR',
    'STRATEGIES',

    # Terrain
    'Terrain',
    'default',
    'grass',
    'mud',
    'water',
    'ALL_TERRAIN_TYPES',
]
