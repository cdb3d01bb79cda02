"""
Multi-target search over a maze grid.

MazeSolver runs one of four strategies from a start cell until the first
target is finalized:

    BFS       FIFO queue, visited at enqueue, ignores terrain
    DFS       LIFO stack, visited at push, ignores terrain
    Dijkstra  heap on accumulated entering penalty, lazy deletion
    A*        heap on penalty + Manhattan distance to the nearest target

Every run returns a SolveResult (parent map, exploration order, reached
target). reconstruct_path() turns that into the final path and its terrain
cost, and keeps them as the solver's last result for the view.

Heap entries are (priority, cell); cells order row-major, so equal
priorities pop the lower row-major cell first.
"""

import heapq
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np
from terrainmaze.config import get_logger, PerformanceTimer
from terrainmaze.maze.cell import Cell
from terrainmaze.maze.grid import Grid
from terrainmaze.maze.utils import min_manhattan

BFS = "BFS"
DFS = "DFS"
DIJKSTRA = "Dijkstra"
ASTAR = "A*"

STRATEGIES = (BFS, DFS, DIJKSTRA, ASTAR)

INF = float("inf")

ParentMap = Dict[Cell, Optional[Cell]]


@dataclass
class SolveResult:
    parent: ParentMap
    exploration_order: List[Cell]
    reached_target: Optional[Cell]
    strategy: str = ""
    # cost the strategy itself accumulated at the target (0 for BFS/DFS)
    algorithm_cost: int = 0
    extra: dict = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.reached_target is not None


def reconstruct_path(grid: Grid, parent: ParentMap, reached_target: Optional[Cell]) -> Tuple[List[Cell], int]:
    """
    Walk parents from the reached target back to the start.

    Returns:
        (path from start to target, sum of terrain penalties along it);
        ([], 0) when no target was reached
    """
    if reached_target is None:
        return [], 0

    path: List[Cell] = []
    current = reached_target
    while current is not None:
        path.append(current)
        current = parent.get(current)
    path.reverse()
    return path, grid.get_path_penalty(path)


class MazeSolver:
    def __init__(self, grid: Grid):
        self.logger = get_logger(__name__)
        self.grid = grid
        self.visited = np.zeros(grid.rows * grid.cols, dtype=bool)
        self.shortest_path: List[Cell] = []
        self.total_penalty = 0
        self.last_result: Optional[SolveResult] = None

        self._dispatch = {
            BFS: self.solve_bfs,
            DFS: self.solve_dfs,
            DIJKSTRA: self.solve_dijkstra,
            ASTAR: self.solve_astar,
        }

    # -------------------------
    # State
    # -------------------------
    def set_grid(self, grid: Grid):
        """Point the solver at a freshly generated grid and drop all old state."""
        self.grid = grid
        self.visited = np.zeros(grid.rows * grid.cols, dtype=bool)
        self.reset()

    def reset(self):
        self._reset_visited()
        self.shortest_path = []
        self.total_penalty = 0
        self.last_result = None

    def _reset_visited(self):
        self.visited.fill(False)

    def get_shortest_path(self) -> List[Cell]:
        return list(self.shortest_path)

    def get_total_penalty(self) -> int:
        return self.total_penalty

    def _is_visited(self, cell: Cell) -> bool:
        return bool(self.visited[self.grid.index_of(cell)])

    def _mark_visited(self, cell: Cell):
        self.visited[self.grid.index_of(cell)] = True

    def _prepare(self, strategy: str, start: Cell, targets: Sequence[Cell]) -> frozenset:
        if not targets:
            self.logger.error(f"{strategy} called with an empty target list")
            raise ValueError("targets must not be empty")
        self.grid.check_cell(start)
        for target in targets:
            self.grid.check_cell(target)
        self._reset_visited()
        return frozenset(targets)

    def _finish(self, result: SolveResult) -> SolveResult:
        if result.found:
            self.logger.info(
                f"{result.strategy}: reached {result.reached_target} after "
                f"exploring {len(result.exploration_order)} cells"
            )
        else:
            self.logger.warning(
                f"{result.strategy}: no target reachable, explored {len(result.exploration_order)} cells"
            )
        self.last_result = result
        return result

    # -------------------------
    # Entry point
    # -------------------------
    def solve(self, strategy: str, start: Cell, targets: Sequence[Cell]) -> SolveResult:
        solve_fn = self._dispatch.get(strategy)
        if solve_fn is None:
            self.logger.error(f"Unknown strategy: {strategy} (expected one of {STRATEGIES})")
            raise ValueError(f"unknown strategy {strategy!r}")

        with PerformanceTimer(self.logger, f"{strategy} search"):
            return solve_fn(start, targets)

    # -------------------------
    # Unweighted strategies
    # -------------------------
    def solve_bfs(self, start: Cell, targets: Sequence[Cell]) -> SolveResult:
        goals = self._prepare(BFS, start, targets)
        queue = deque([start])
        parent: ParentMap = {start: None}
        order: List[Cell] = []
        self._mark_visited(start)

        while queue:
            current = queue.popleft()
            order.append(current)
            if current in goals:
                return self._finish(SolveResult(parent, order, current, BFS))

            for neighbor in self.grid.get_accessible_neighbors(current):
                if not self._is_visited(neighbor):
                    self._mark_visited(neighbor)
                    parent[neighbor] = current
                    queue.append(neighbor)

        return self._finish(SolveResult(parent, order, None, BFS))

    def solve_dfs(self, start: Cell, targets: Sequence[Cell]) -> SolveResult:
        goals = self._prepare(DFS, start, targets)
        stack = [start]
        parent: ParentMap = {start: None}
        order: List[Cell] = []
        self._mark_visited(start)

        while stack:
            current = stack.pop()
            order.append(current)
            if current in goals:
                return self._finish(SolveResult(parent, order, current, DFS))

            for neighbor in self.grid.get_accessible_neighbors(current):
                if not self._is_visited(neighbor):
                    self._mark_visited(neighbor)
                    parent[neighbor] = current
                    stack.append(neighbor)

        return self._finish(SolveResult(parent, order, None, DFS))

    # -------------------------
    # Weighted strategies
    # -------------------------
    def solve_dijkstra(self, start: Cell, targets: Sequence[Cell]) -> SolveResult:
        return self._best_first(DIJKSTRA, start, targets, use_heuristic=False)

    def solve_astar(self, start: Cell, targets: Sequence[Cell]) -> SolveResult:
        return self._best_first(ASTAR, start, targets, use_heuristic=True)

    def _best_first(self, strategy: str, start: Cell, targets: Sequence[Cell], use_heuristic: bool) -> SolveResult:
        """
        Shared Dijkstra / A* loop. With the heuristic the heap key is
        g + min Manhattan distance to any target; the heuristic is not
        admissible on zero-penalty terrain and is used as is.
        """
        goals = self._prepare(strategy, start, targets)

        def priority(cell, g):
            return g + min_manhattan(cell, goals) if use_heuristic else g

        cost: Dict[Cell, int] = {start: 0}
        parent: ParentMap = {start: None}
        order: List[Cell] = []
        frontier = [(priority(start, 0), start)]
        stale = 0

        while frontier:
            _, current = heapq.heappop(frontier)
            if self._is_visited(current):
                stale += 1
                continue
            self._mark_visited(current)
            order.append(current)

            if current in goals:
                return self._finish(SolveResult(
                    parent, order, current, strategy,
                    algorithm_cost=cost[current], extra={'stale_pops': stale}
                ))

            for neighbor in self.grid.get_accessible_neighbors(current):
                if self._is_visited(neighbor):
                    continue
                new_cost = cost[current] + self.grid.get_penalty(neighbor)
                if new_cost < cost.get(neighbor, INF):
                    cost[neighbor] = new_cost
                    parent[neighbor] = current
                    heapq.heappush(frontier, (priority(neighbor, new_cost), neighbor))

        return self._finish(SolveResult(parent, order, None, strategy, extra={'stale_pops': stale}))

    # -------------------------
    # Path reconstruction
    # -------------------------
    def reconstruct_path(self, parent: ParentMap, reached_target: Optional[Cell]) -> Tuple[List[Cell], int]:
        """Rebuild and remember the path to `reached_target` and its total penalty."""
        self.shortest_path, self.total_penalty = reconstruct_path(self.grid, parent, reached_target)
        if reached_target is not None:
            self.logger.debug(
                f"Path to {reached_target}: {len(self.shortest_path)} cells, penalty {self.total_penalty}"
            )
        return self.get_shortest_path(), self.total_penalty
