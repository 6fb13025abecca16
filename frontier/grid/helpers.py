"""Utilities for building, searching and snapshotting spatial grids."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from ..errors import UnreachableError
from ..geometry import Coord, as_coord
from ..search.bfs import reachable, shortest_path
from .grid import SpatialGrid
from .schemas import CellState, GridState, WindowState

V = TypeVar("V")


def grid_from_rows(
    rows: Sequence[str],
    parse: Callable[[str], V],
    default: Optional[V],
    separator: Optional[str] = None,
) -> SpatialGrid[V]:
    """Build a dynamic grid from row-major text.

    Each row is split into cells (per character when ``separator`` is None) and every
    cell is parsed with ``parse``. Cells that parse to the default are not stored, so
    they only exist through the grid's default-value reads.
    """

    grid: SpatialGrid[V] = SpatialGrid(default)
    for y, row in enumerate(rows):
        cells = list(row) if separator is None else row.split(separator)
        for x, text in enumerate(cells):
            value = parse(text)
            # Skip defaults (and parse results of None, which cannot be stored)
            if value is None or value == default:
                continue
            grid.set(Coord(x, y), value)
    return grid


def char_grid(rows: Sequence[str], default: str = ".") -> SpatialGrid[str]:
    """One character per cell; ``default`` characters stay unstored."""
    return grid_from_rows(rows, lambda ch: ch, default)


def digit_grid(rows: Sequence[str], default: int = -1) -> SpatialGrid[int]:
    """One decimal digit per cell."""
    return grid_from_rows(rows, int, default)


def boolean_grid(rows: Sequence[str], true_char: str = "#") -> SpatialGrid[bool]:
    """``True`` where the row holds ``true_char``; ``False`` is the default."""
    return grid_from_rows(rows, lambda ch: ch == true_char, False)


def grid_successors(
    grid: SpatialGrid[V],
    passable: Callable[[Optional[V]], bool],
    *,
    diagonals: bool = False,
) -> Callable[[Coord], List[Coord]]:
    """Adapt a grid into a successor function for the frontier searches.

    Successors are the in-window neighbours whose value (stored or default) satisfies
    ``passable``. The window check keeps searches on dynamic grids finite.
    """

    def successors(coord: Coord) -> List[Coord]:
        return grid.get_neighbours(
            coord,
            diagonals,
            lambda n: grid.contains(n) and passable(grid.get(n)),
        )

    return successors


def grid_shortest_path(
    grid: SpatialGrid[V],
    start: Tuple[int, int],
    goal: Tuple[int, int],
    passable: Callable[[Optional[V]], bool],
    *,
    diagonals: bool = False,
) -> Optional[List[Coord]]:
    """Return a minimal path of coordinates from start to goal, or None if blocked.

    Path includes both start and goal. Only cells satisfying ``passable`` are entered.
    """

    try:
        return shortest_path(
            as_coord(start),
            as_coord(goal),
            grid_successors(grid, passable, diagonals=diagonals),
        )
    except UnreachableError:
        # Goal blocked or disconnected
        return None


def grid_distances(
    grid: SpatialGrid[V],
    start: Tuple[int, int],
    passable: Callable[[Optional[V]], bool],
    *,
    diagonals: bool = False,
) -> Dict[Coord, int]:
    """Step distance from ``start`` to every reachable passable cell."""
    return reachable(as_coord(start), grid_successors(grid, passable, diagonals=diagonals))


def snapshot_grid(grid: SpatialGrid[Any]) -> GridState:
    """Capture a grid as a serializable ``GridState``."""

    window = grid.window
    if window.is_empty:
        window_state = WindowState(fixed=window.fixed)
    else:
        window_state = WindowState(
            min_coord=tuple(window.min_coord),
            max_coord=tuple(window.max_coord),
            fixed=window.fixed,
        )
    cells = [
        CellState(x=c.x, y=c.y, value=value)
        for c, value in sorted(grid.items(), key=lambda item: (item[0].y, item[0].x))
    ]
    return GridState(default=grid.default, window=window_state, cells=cells)


def restore_grid(state: GridState) -> SpatialGrid[Any]:
    """Rebuild a ``SpatialGrid`` from a ``GridState`` snapshot."""

    grid: SpatialGrid[Any] = SpatialGrid(state.default)
    if state.window.fixed:
        grid.fix_window(state.window.min_coord, state.window.max_coord)
    for cell in state.cells:
        grid.set((cell.x, cell.y), cell.value)
    return grid
