"""
Frontier - toolkit for exploring discrete state spaces.

Sparse auto-bounding 2D grids plus breadth-first and weighted frontier searches
over any hashable state.

No file I/O. No global state beyond optional tracing configuration.
Successor functions are supplied by the caller.
"""

__version__ = "0.1.0"

from .config import Config

# Errors
from .errors import (
    FrontierError,
    InvalidValueError,
    WindowUndefinedError,
    OutOfBoundsError,
    UnreachableError,
    UnreachableTargetsError,
    EmptyQueueError,
)

# Geometry
from .geometry import Coord, Window

# Grids
from .grid import (
    SpatialGrid,
    GridState,
    WindowState,
    CellState,
    grid_from_rows,
    char_grid,
    digit_grid,
    boolean_grid,
    grid_successors,
    grid_shortest_path,
    grid_distances,
    snapshot_grid,
    restore_grid,
)

# Searches
from .search import (
    distances,
    distance,
    reachable,
    shortest_paths,
    shortest_path,
    QueueEntry,
    UniquePriorityQueue,
    weighted_distances,
    cheapest_path,
    find_first,
)

__all__ = [
    "Config",
    # Errors
    "FrontierError",
    "InvalidValueError",
    "WindowUndefinedError",
    "OutOfBoundsError",
    "UnreachableError",
    "UnreachableTargetsError",
    "EmptyQueueError",
    # Geometry
    "Coord",
    "Window",
    # Grids
    "SpatialGrid",
    "GridState",
    "WindowState",
    "CellState",
    "grid_from_rows",
    "char_grid",
    "digit_grid",
    "boolean_grid",
    "grid_successors",
    "grid_shortest_path",
    "grid_distances",
    "snapshot_grid",
    "restore_grid",
    # Searches
    "distances",
    "distance",
    "reachable",
    "shortest_paths",
    "shortest_path",
    "QueueEntry",
    "UniquePriorityQueue",
    "weighted_distances",
    "cheapest_path",
    "find_first",
]
