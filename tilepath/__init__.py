"""
Tilepath - path search on rectangular tile grids.

Build a grid, connect its cells, and search it directly or through a
bounded path cache.

No file I/O. No global state beyond environment-driven defaults.
"""

__version__ = "0.1.0"

# Core types
from .position import Position, as_position
from .node import Node, NodeConnection, SearchRecord
from .grid import Grid, OutOfBoundsError
from .cache import CachedPath, PathCache
from .solver import PathSolver

# Snapshots
from .schemas import (
    CachedPathState,
    GridState,
    NodeState,
    PathCacheState,
)

# Helpers
from .helpers import (
    grid_from_tiles,
    is_contiguous_path,
    path_cost,
    path_positions,
    undirected_edges,
)

from .config import Config

__all__ = [
    # Core types
    "Position",
    "as_position",
    "Node",
    "NodeConnection",
    "SearchRecord",
    "Grid",
    "OutOfBoundsError",
    "CachedPath",
    "PathCache",
    "PathSolver",
    # Snapshots
    "NodeState",
    "GridState",
    "CachedPathState",
    "PathCacheState",
    # Helpers
    "grid_from_tiles",
    "is_contiguous_path",
    "path_cost",
    "path_positions",
    "undirected_edges",
    # Configuration
    "Config",
]
