"""
Configuration constants for the grid pathfinding engine.

Grid defaults, iteration caps, and tuning knobs live here.
The log level can be overridden through the LOG_LEVEL environment variable.
"""

import logging
import os
from typing import Optional

# =============================================================================
# Grid Configuration
# =============================================================================

# Default size of the main grid
DEFAULT_ROWS = 20
DEFAULT_COLS = 50

# Characters understood by parse_grid / produced by render_grid
CHAR_EMPTY = "."
CHAR_WALL = "#"
CHAR_START = "S"
CHAR_END = "E"
CHAR_VISITED = "o"
CHAR_PATH = "*"

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Bellman-Ford relaxes at most min(node_count - 1, this) full passes
BELLMAN_FORD_MAX_PASSES = 500

# IDA* gives up after this many threshold increases
IDA_STAR_MAX_ITERATIONS = 1000

# Wall follower takes at most rows * cols * this many steps
WALL_FOLLOWER_STEP_FACTOR = 4

# Swarm ranking: distance ** G_EXP + heuristic ** H_EXP
SWARM_DISTANCE_EXPONENT = 1.3
SWARM_HEURISTIC_EXPONENT = 1.8

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler using LOG_LEVEL unless a level is given."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
