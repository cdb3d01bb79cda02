"""
Perfect maze generator with terrain and multiple finish cells.

This module implements MazeGenerator which exposes:
    config = MazeConfig(...)
    generator = MazeGenerator(config)
    grid, destinations = generator.generate()
    stats = generator.get_statistics()
"""
import random
from typing import List, Tuple, Optional
from terrainmaze.config import get_maze_logger, PerformanceTimer
from terrainmaze.maze.config import MazeConfig
from terrainmaze.maze.cell import Cell, ORIGIN
from terrainmaze.maze.grid import Grid
from terrainmaze.maze.terrain import default, grass, mud, water
from terrainmaze.maze.utils import DisjointSet, create_all_edges, bfs_reachable


class MazeGenerator:
    """
    Maze generator class.

    - Uses MazeConfig for all configurable parameters.
    - Uses deterministic RNG (config.seed) for reproducibility.
    - Public method `generate()` returns a validated grid and its destinations.
    """
    def __init__(self, config: MazeConfig = None, rng: random.Random = None):
        self.config = config or MazeConfig()
        self.logger = get_maze_logger()

        # Deterministic RNG unless an explicit source is injected
        if rng is not None:
            self.rng = rng
            self.logger.info("Generator initialized with injected random source")
        elif self.config.seed is not None:
            self.rng = random.Random(self.config.seed)
            self.logger.info(f"Generator initialized with seed: {self.config.seed}")
        else:
            self.rng = random.Random()
            self.logger.info("Generator initialized with random seed")

        # Maze state
        self.grid: Optional[Grid] = None
        self.destinations: List[Cell] = []
        self.carved_edges = 0
        self.destination_draws = 0
        self.generation_count = 0

    # -------------------------
    # Entry points
    # -------------------------
    def generate(self) -> Tuple[Grid, List[Cell]]:
        """
        Run the full generation pipeline and return (grid, destinations).

        Stages:
          - fresh grid, every wall closed, terrain rolled per cell
          - Kruskal carve over a shuffled edge list
          - destination selection outside the start zone
          - final validation
        """
        rows, cols = self.config.rows, self.config.cols

        with PerformanceTimer(self.logger, f"maze generation {rows}x{cols}"):
            # Phase 1: new grid replaces whatever was there before
            self.grid = self._initialize_grid()
            self.destinations = []

            # Phase 2: spanning tree
            self._carve_spanning_tree()

            # Phase 3: finish cells
            self._generate_destinations()

            # Phase 4: sanity checks
            self._final_validation()

        self.generation_count += 1
        self.logger.info(
            f"Maze complete: {self.carved_edges} passages, "
            f"destinations={[str(d) for d in self.destinations]}"
        )
        return self.grid, self.destinations

    def reset(self) -> Tuple[Grid, List[Cell]]:
        """Discard the current grid and destinations and build a new maze."""
        self.logger.info("Resetting maze")
        self.grid = None
        self.destinations = []
        return self.generate()

    def get_grid(self) -> Optional[Grid]:
        return self.grid

    def get_destinations(self) -> List[Cell]:
        return list(self.destinations)

    def get_start(self) -> Cell:
        return ORIGIN

    # -------------------------
    # Phase helpers
    # -------------------------
    def _initialize_grid(self) -> Grid:
        grid = Grid(self.config.rows, self.config.cols)
        cfg = self.config

        for cell in grid.cells():
            if cell == ORIGIN:
                continue  # start is always plain ground
            chance = self.rng.randrange(100)
            if chance < cfg.grass_threshold:
                grid.set_terrain(cell, grass)
            elif chance < cfg.mud_threshold:
                grid.set_terrain(cell, mud)
            elif chance < cfg.water_threshold:
                grid.set_terrain(cell, water)
            else:
                grid.set_terrain(cell, default)

        self.logger.debug(f"Terrain rolled: {grid.get_terrain_counts()}")
        return grid

    def _carve_spanning_tree(self):
        """Randomized Kruskal: open a wall whenever it joins two separate regions."""
        grid = self.grid
        edges = create_all_edges(grid.rows, grid.cols)
        self.rng.shuffle(edges)
        self.logger.debug(f"Shuffled {len(edges)} candidate edges")

        sets = DisjointSet(grid.rows * grid.cols)
        carved = 0
        for a, b in edges:
            ia, ib = grid.index_of(a), grid.index_of(b)
            if sets.is_connected(ia, ib):
                continue  # would close a cycle
            sets.union(ia, ib)
            grid.remove_wall_between(a, b)
            carved += 1

        self.carved_edges = carved

    def _generate_destinations(self):
        """Rejection-sample distinct finish cells away from the start zone."""
        cfg = self.config
        if cfg.eligible_destination_count < cfg.destination_count:
            self.logger.error(
                f"{cfg.rows}x{cfg.cols} grid has only {cfg.eligible_destination_count} cells "
                f"outside the {cfg.exclusion_zone}x{cfg.exclusion_zone} start zone, "
                f"need {cfg.destination_count}"
            )
            raise ValueError("grid too small for the requested destinations")

        used = {ORIGIN}
        draws = 0
        while len(self.destinations) < cfg.destination_count:
            if draws >= cfg.max_destination_attempts:
                self.logger.error(f"Gave up placing destinations after {draws} draws")
                raise RuntimeError(f"could not place {cfg.destination_count} destinations")
            draws += 1

            r = self.rng.randrange(cfg.rows)
            c = self.rng.randrange(cfg.cols)
            if r < cfg.exclusion_zone and c < cfg.exclusion_zone:
                continue

            candidate = Cell(r, c)
            if candidate not in used:
                used.add(candidate)
                self.destinations.append(candidate)

        self.destination_draws = draws
        self.logger.debug(f"Placed {len(self.destinations)} destinations in {draws} draws")

    def _final_validation(self):
        grid = self.grid
        expected = grid.rows * grid.cols - 1

        open_count = grid.count_open_adjacencies()
        if self.carved_edges != expected or open_count != expected:
            self.logger.error(
                f"Spanning tree broken: carved={self.carved_edges}, open={open_count}, expected={expected}"
            )
            raise RuntimeError("maze is not a spanning tree")

        reachable = bfs_reachable(grid, ORIGIN)
        missing = [d for d in self.destinations if d not in reachable]
        if len(reachable) != grid.rows * grid.cols or missing:
            self.logger.error(f"Maze disconnected: reached {len(reachable)} cells, missing {missing}")
            raise RuntimeError("maze is not connected")

    # -------------------------
    # Statistics
    # -------------------------
    def get_statistics(self) -> dict:
        if self.grid is None:
            return {}
        grid = self.grid
        return {
            'rows': grid.rows,
            'cols': grid.cols,
            'open_adjacencies': grid.count_open_adjacencies(),
            'dead_ends': grid.count_dead_ends(),
            'terrain': grid.get_terrain_counts(),
            'destinations': self.get_destinations(),
            'destination_draws': self.destination_draws,
            'generations': self.generation_count,
        }


def generate(rows: int, cols: int, seed: Optional[int] = None) -> Tuple[Grid, List[Cell]]:
    """Build a fresh maze and its destinations in one call."""
    return MazeGenerator(MazeConfig(rows=rows, cols=cols, seed=seed)).generate()
