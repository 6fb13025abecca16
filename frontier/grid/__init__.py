"""Sparse spatial grids and their helpers."""

from .grid import SpatialGrid
from .schemas import CellState, GridState, WindowState
from .helpers import (
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

__all__ = [
    "SpatialGrid",
    "CellState",
    "GridState",
    "WindowState",
    "grid_from_rows",
    "char_grid",
    "digit_grid",
    "boolean_grid",
    "grid_successors",
    "grid_shortest_path",
    "grid_distances",
    "snapshot_grid",
    "restore_grid",
]
