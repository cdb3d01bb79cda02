"""
Replay controller between the maze engine and the window.

A solve runs to completion immediately; the controller then reveals the
captured exploration order a few cells at a time as the main loop feeds it
elapsed milliseconds. Once every explored cell is shown the reconstructed
path and its penalty are published.

Nothing here imports pygame, so the controller can be driven headless.
"""

from typing import List, Optional, Set
from terrainmaze.config import (
    get_logger, MIN_ANIMATION_DELAY, MAX_ANIMATION_DELAY, DEFAULT_ANIMATION_SPEED,
    FAST_STEP_THRESHOLD, FAST_STEPS_PER_TICK
)
from terrainmaze.maze.cell import Cell
from terrainmaze.maze.mazeGen import MazeGenerator
from terrainmaze.maze.solver import MazeSolver, SolveResult


def delay_for_speed(speed_ratio: float) -> int:
    """Map a slider ratio in [0, 1] to milliseconds per replay tick."""
    speed_ratio = max(0.0, min(1.0, speed_ratio))
    return MAX_ANIMATION_DELAY - int(speed_ratio * (MAX_ANIMATION_DELAY - MIN_ANIMATION_DELAY))


class MazeController:
    def __init__(self, generator: MazeGenerator, solver: MazeSolver = None):
        self.logger = get_logger(__name__)
        self.generator = generator
        if generator.get_grid() is None:
            generator.generate()
        self.solver = solver or MazeSolver(generator.get_grid())

        self.current_delay = delay_for_speed(DEFAULT_ANIMATION_SPEED)

        # replay state
        self.explored_cells: Set[Cell] = set()
        self.shortest_path: List[Cell] = []
        self.algorithm_name = "-"
        self.total_penalty = 0
        self._order: List[Cell] = []
        self._index = 0
        self._elapsed = 0.0
        self._running = False
        self._pending_result: Optional[SolveResult] = None

    # -------------------------
    # Accessors for the view
    # -------------------------
    @property
    def grid(self):
        return self.generator.get_grid()

    @property
    def destinations(self) -> List[Cell]:
        return self.generator.get_destinations()

    @property
    def start(self) -> Cell:
        return self.generator.get_start()

    @property
    def is_animating(self) -> bool:
        return self._running

    @property
    def status(self) -> str:
        return f"Algorithm: {self.algorithm_name} | Total Penalty: {self.total_penalty}"

    # -------------------------
    # Commands
    # -------------------------
    def set_animation_speed(self, speed_ratio: float):
        self.current_delay = delay_for_speed(speed_ratio)
        self.logger.debug(f"Animation delay set to {self.current_delay}ms")

    def stop_animation(self):
        if self._running:
            self.logger.debug(f"Replay stopped at step {self._index}/{len(self._order)}")
        self._running = False

    def _prepare_solve(self):
        self.stop_animation()
        self.explored_cells = set()
        self.shortest_path = []
        self.solver.reset()

    def solve(self, strategy: str) -> SolveResult:
        """Run `strategy` to completion and start replaying its exploration."""
        self._prepare_solve()
        result = self.solver.solve(strategy, self.start, self.destinations)
        if result.reached_target is not None:
            self.solver.reconstruct_path(result.parent, result.reached_target)

        self._pending_result = result
        self._order = result.exploration_order
        self._index = 0
        self._elapsed = 0.0
        self._running = True
        self.logger.info(f"Replaying {len(self._order)} steps of {strategy}")
        return result

    def tick(self, elapsed_ms: float) -> bool:
        """
        Advance the replay by `elapsed_ms`.

        Returns:
            True while the replay is still running
        """
        if not self._running:
            return False

        self._elapsed += elapsed_ms
        while self._running and self._elapsed >= self.current_delay:
            self._elapsed -= self.current_delay
            self._step()
        return self._running

    def _step(self):
        steps = FAST_STEPS_PER_TICK if self.current_delay < FAST_STEP_THRESHOLD else 1
        for _ in range(steps):
            if self._index < len(self._order):
                self.explored_cells.add(self._order[self._index])
                self._index += 1
            else:
                self._complete()
                return

    def _complete(self):
        self._running = False
        result = self._pending_result
        self.shortest_path = self.solver.get_shortest_path()
        self.total_penalty = self.solver.get_total_penalty()
        self.algorithm_name = result.strategy if result else "-"
        self.logger.info(f"{self.status}")

    def finish_animation(self):
        """Reveal the rest of the replay at once."""
        if not self._running:
            return
        self.explored_cells.update(self._order[self._index:])
        self._index = len(self._order)
        self._complete()

    def generate_new_maze(self):
        self.stop_animation()
        grid, destinations = self.generator.reset()
        self.solver.set_grid(grid)
        self.explored_cells = set()
        self.shortest_path = []
        self._order = []
        self._pending_result = None
        self.algorithm_name = "-"
        self.total_penalty = 0
        self.logger.info(f"New maze ready with destinations {[str(d) for d in destinations]}")
