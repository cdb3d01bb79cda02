"""
Maze generation configuration.

All tunable generation parameters live in MazeConfig so a generator can be
reproduced exactly from its config (seed included).
"""

from dataclasses import dataclass
from typing import Optional
from terrainmaze.config import MAZE_ROWS, MAZE_COLS, get_logger


@dataclass
class MazeConfig:
    # Grid size in cells
    rows: int = MAZE_ROWS
    cols: int = MAZE_COLS

    # None -> fresh OS entropy on every run
    seed: Optional[int] = None

    # Finish cells and the square around the origin they must avoid
    destination_count: int = 3
    exclusion_zone: int = 5
    max_destination_attempts: int = 10_000

    # Terrain roll: randrange(100) below grass -> Grass, below mud -> Mud,
    # below water -> Water, otherwise Default
    grass_threshold: int = 10
    mud_threshold: int = 20
    water_threshold: int = 30

    def __post_init__(self):
        logger = get_logger(__name__)

        if self.rows <= 0 or self.cols <= 0:
            logger.error(f"Invalid maze size {self.rows}x{self.cols}")
            raise ValueError("rows and cols must be positive")

        if self.destination_count <= 0:
            logger.error(f"Invalid destination count: {self.destination_count}")
            raise ValueError("destination_count must be positive")

        if self.exclusion_zone < 1:
            logger.error(f"Invalid exclusion zone: {self.exclusion_zone}")
            raise ValueError("exclusion_zone must be at least 1 (the origin itself)")

        if self.max_destination_attempts <= 0:
            raise ValueError("max_destination_attempts must be positive")

        if not 0 <= self.grass_threshold <= self.mud_threshold <= self.water_threshold <= 100:
            logger.error(
                f"Terrain thresholds out of order: grass={self.grass_threshold}, "
                f"mud={self.mud_threshold}, water={self.water_threshold}"
            )
            raise ValueError("terrain thresholds must satisfy 0 <= grass <= mud <= water <= 100")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def edge_count(self) -> int:
        return self.rows * (self.cols - 1) + self.cols * (self.rows - 1)

    @property
    def eligible_destination_count(self) -> int:
        """Cells outside the exclusion square around the origin."""
        zone = min(self.rows, self.exclusion_zone) * min(self.cols, self.exclusion_zone)
        return self.cell_count - zone
