"""
Configuration and utility functions for Terrain Maze.

This module provides:
- Global configuration constants (maze dimensions, layout, animation timing)
- Logging setup with automatic file rotation
- Project root path discovery
- Performance monitoring utilities

The configuration system is designed to be imported early and provide
foundational utilities used throughout the application. It never touches
pygame, so the maze engine can be imported without a display.
"""

import logging
import sys
import time
from datetime import datetime, timedelta
from pathlib import Path
import shutil

# ============================================================================
# CONFIGURATION CONSTANTS
# ============================================================================

# Maze dimensions in cells
MAZE_ROWS = 30  # Vertical cell count
MAZE_COLS = 40  # Horizontal cell count

# Layout in pixels
CELL_SIZE = 20  # Size of each cell
MARGIN = 20  # Border around the maze surface
SIDE_PANEL_WIDTH = 200
BUTTON_BAR_HEIGHT = 60

TARGET_FPS = 60

# Replay timing (milliseconds per revealed step)
MIN_ANIMATION_DELAY = 1
MAX_ANIMATION_DELAY = 150
DEFAULT_ANIMATION_SPEED = 0.8  # slider ratio in [0, 1]
FAST_STEP_THRESHOLD = 5  # below this delay several cells are revealed per tick
FAST_STEPS_PER_TICK = 5


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

def setup_logging(project_root):
    """
    Send DEBUG and up to a fresh log_dump/maze_<timestamp>.log and to stdout.

    Logs from earlier days are moved to old_log_dump/ first. Returns the
    'TerrainMaze' application logger.
    """
    root = Path(project_root)
    log_dir = root / "log_dump"
    old_log_dir = root / "old_log_dump"
    for directory in (log_dir, old_log_dir):
        directory.mkdir(exist_ok=True)

    archived = _archive_old_logs(log_dir, old_log_dir)

    log_path = log_dir / f"maze_{datetime.now():%Y%m%d_%H%M%S}.log"
    logging.basicConfig(
        level=logging.DEBUG,
        format='[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(log_path, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger('TerrainMaze')
    logger.info(f"Writing log to {log_path} ({archived} old file(s) archived)")
    return logger


def _archive_old_logs(log_dir, archive_dir):
    """
    Move log files older than 1 day to archive directory.

    Args:
        log_dir (Path): Directory containing current logs
        archive_dir (Path): Directory for archived logs

    Returns:
        int: Number of archived files
    """
    cutoff_time = datetime.now() - timedelta(days=1)
    archived = 0

    for log_file in log_dir.glob("*.log"):
        file_mtime = datetime.fromtimestamp(log_file.stat().st_mtime)

        if file_mtime < cutoff_time:
            shutil.move(str(log_file), str(archive_dir / log_file.name))
            archived += 1
            print(f"Archived old log: {log_file.name}")

    return archived


def get_logger(name=None):
    """
    Get a logger instance for a specific module.

    This should be called at the top of each module:
        logger = get_logger(__name__)

    Args:
        name (str, optional): Logger name, typically __name__

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name or 'TerrainMaze')


def get_maze_logger():
    """
    Get a specialized logger for maze generation.

    Keeps generation chatter (edge counts, destination draws) apart from
    solver and UI logs.

    Returns:
        logging.Logger: Maze generation logger instance
    """
    return logging.getLogger('TerrainMaze.MazeGeneration')


class PerformanceTimer:
    """
    Context manager for timing and logging operation duration.

    Usage:
        with PerformanceTimer(logger, "Operation name"):
            # ... code to time ...

    Attributes:
        logger: Logger instance to use for output
        operation_name: Name of the operation being timed
        start_time: Time when context was entered
        elapsed: Seconds spent inside the context (set on exit)
    """

    def __init__(self, logger, operation_name):
        self.logger = logger
        self.operation_name = operation_name
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start_time
        self.logger.info(f"Completed: {self.operation_name} in {self.elapsed:.3f}s")
        return False


# ============================================================================
# PROJECT ROOT DISCOVERY
# ============================================================================

_CACHED_PROJECT_ROOT = None


def get_project_root(marker="terrainmaze"):
    """
    Nearest directory above this file that contains `marker`, as a string.

    Cached after the first lookup. Raises FileNotFoundError when no ancestor
    has the marker.
    """
    global _CACHED_PROJECT_ROOT

    if _CACHED_PROJECT_ROOT:
        return _CACHED_PROJECT_ROOT

    logger = get_logger(__name__)
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / marker).exists():
            _CACHED_PROJECT_ROOT = str(candidate)
            logger.info(f"Project root: {_CACHED_PROJECT_ROOT}")
            return _CACHED_PROJECT_ROOT

    logger.error(f"No directory above {here} contains '{marker}'")
    raise FileNotFoundError(f"Could not find project root containing '{marker}'")
