"""
Configuration constants for pathlab.

All tunable parameters are defined here. Values that make sense to change
per environment are read from environment variables (a local .env file is
loaded first).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable ("1", "true", "yes", "on")."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# =============================================================================
# Graph Defaults
# =============================================================================

# New graphs are undirected and weighted, like the editor's blank canvas
DEFAULT_IS_DIRECTED = False
DEFAULT_IS_WEIGHTED = True

# Weight given to an edge when the caller does not supply one
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Sample Graph Configuration
# =============================================================================

# Grid graphs: distance between neighbouring nodes and top-left margin
GRID_SPACING = 100
GRID_OFFSET = 100

# Grid edge weights are drawn uniformly from [MIN, MAX]
GRID_WEIGHT_MIN = 1
GRID_WEIGHT_MAX = 9

# =============================================================================
# Algorithm Configuration
# =============================================================================

# A* heuristic: euclidean pixel distance divided by this scale.
# Not admissible in general - it only underestimates when edge weights
# are at least (on-screen length / scale).
ASTAR_HEURISTIC_SCALE = float(os.environ.get("PATHLAB_ASTAR_SCALE", "50"))

# Copy distances/visited/frontier into every recorded step.
# Disable for large graphs: memory grows as steps x graph size.
RECORD_SNAPSHOTS = _env_flag("PATHLAB_RECORD_SNAPSHOTS", True)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
