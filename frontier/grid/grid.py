"""Sparse 2D grid keyed by integer coordinates.

Only explicitly written cells are stored; every other coordinate reads as the grid
default. A Window tracks the extent of the stored cells (dynamic grids) or pins the
canvas to a caller-chosen rectangle (fixed grids).
"""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    Generic,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    ValuesView,
)

from ..errors import InvalidValueError, OutOfBoundsError, WindowUndefinedError
from ..geometry import Coord, Window, as_coord

V = TypeVar("V")

_MISSING = object()


class SpatialGrid(Generic[V]):
    """Sparse coordinate -> value map layered on a bounding Window.

    Reads are permissive: ``get`` never validates the coordinate and falls back to the
    default. Writes and membership-dependent queries are strict and raise.
    """

    def __init__(
        self,
        default: Optional[V] = None,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ):
        self._cells: Dict[Coord, V] = {}
        self._default = default
        if width is None and height is None:
            self._window = Window()
        elif width is not None and height is not None:
            self._window = Window.of_size(width, height)
        else:
            raise ValueError("A fixed grid needs both width and height")

    # ------------------------------------------------------------------
    # Window management
    # ------------------------------------------------------------------

    @property
    def default(self) -> Optional[V]:
        return self._default

    @default.setter
    def default(self, value: Optional[V]) -> None:
        self._default = value

    @property
    def window(self) -> Window:
        return self._window

    @property
    def fixed(self) -> bool:
        return self._window.fixed

    @property
    def size(self) -> Optional[Coord]:
        return self._window.size

    def fix_window(
        self,
        top_left: Optional[Tuple[int, int]] = None,
        bottom_right: Optional[Tuple[int, int]] = None,
    ) -> None:
        """Pin the window to the current extent, or to an explicit rectangle."""
        if top_left is None and bottom_right is None:
            if self._window.is_empty:
                raise WindowUndefinedError("Cannot fix an empty window")
            top_left, bottom_right = self._window.min_coord, self._window.max_coord
        elif top_left is None or bottom_right is None:
            raise ValueError("Both corners are required to fix an explicit window")
        self._window = Window.between(top_left, bottom_right)

    def unfix_window(self) -> None:
        """Switch back to a dynamic window recomputed from the stored keys."""
        self._window = Window()
        self._window.resize(self._cells.keys())

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def set(self, coord: Tuple[int, int], value: V) -> Optional[V]:
        """Store ``value`` at ``coord`` and return the previous stored value, if any."""
        if value is None:
            raise InvalidValueError("Value cannot be set to None (use unset)")
        c = as_coord(coord)
        self._window.include(c)
        previous = self._cells.get(c)
        self._cells[c] = value
        return previous

    def set_region(self, region: Window, value: V) -> None:
        for c in region:
            self.set(c, value)

    def get(self, coord: Tuple[int, int], default=_MISSING) -> Optional[V]:
        """Return the stored value, or the (overridable) grid default."""
        fallback = self._default if default is _MISSING else default
        return self._cells.get(as_coord(coord), fallback)

    def unset(self, coord: Tuple[int, int]) -> Optional[V]:
        """Remove the entry at ``coord`` and return it (None if nothing was stored)."""
        c = as_coord(coord)
        previous = self._cells.pop(c, None)
        # Only a border removal can shrink the extent
        if not self._window.fixed and not self._window.is_empty and self._window.on_border(c):
            self._window.resize(self._cells.keys())
        return previous

    def unset_all(self, coords: Iterable[Tuple[int, int]]) -> None:
        """Remove many entries with a single trailing resize."""
        for coord in coords:
            self._cells.pop(as_coord(coord), None)
        self._window.resize(self._cells.keys())

    def update(self, coord: Tuple[int, int], func: Callable[[Optional[V]], V]) -> Optional[V]:
        """Apply ``func`` to the current value (or default) and store the result."""
        return self.set(coord, func(self.get(coord)))

    def has_value(self, coord: Tuple[int, int]) -> bool:
        return as_coord(coord) in self._cells

    def keys(self) -> KeysView[Coord]:
        return self._cells.keys()

    def values(self) -> ValuesView[V]:
        return self._cells.values()

    def items(self) -> ItemsView[Coord, V]:
        return self._cells.items()

    def find(self, value: V) -> List[Coord]:
        """Return every stored coordinate holding ``value``."""
        return [c for c, v in self._cells.items() if v == value]

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def count(self, value: V) -> int:
        """Count cells holding ``value``.

        When ``value`` is the grid default, the unlisted in-window cells are counted as
        well (window area minus stored entries). No other value gets implicit coverage.
        """
        if value is None:
            raise InvalidValueError("Value to count cannot be None")
        total = sum(1 for v in self._cells.values() if v == value)
        if value == self._default:
            total += self._window.count() - len(self._cells)
        return total

    def count_if(self, predicate: Callable[[Coord], bool]) -> int:
        """Count window coordinates (dense, row-major) satisfying ``predicate``."""
        return sum(1 for c in self._window if predicate(c))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def contains(self, coord: Tuple[int, int]) -> bool:
        return self._window.contains(coord)

    def relative(self, coord: Tuple[int, int]) -> Coord:
        """Offset of ``coord`` from the window's minimum corner."""
        return self._window.min_coord.diff(coord)

    def get_neighbours(
        self,
        coord: Tuple[int, int],
        diagonals: bool = False,
        predicate: Optional[Callable[[Coord], bool]] = None,
    ) -> List[Coord]:
        """Return the adjacent coordinates of ``coord``.

        A fixed grid is a bounded canvas, so neighbours outside it are dropped. A dynamic
        grid is an open sparse space and does not filter by extent at all.

        Raises:
            OutOfBoundsError: If ``coord`` itself lies outside the window
            WindowUndefinedError: If the grid has no extent yet
        """
        c = as_coord(coord)
        if not self.contains(c):
            raise OutOfBoundsError(f"The coordinate is not within the grid: {c}")
        neighbours = []
        for n in c.adjacent(diagonals):
            if self._window.fixed and not self._window.contains(n):
                continue
            if predicate is not None and not predicate(n):
                continue
            neighbours.append(n)
        return neighbours

    def rotate(self, quarter_turns: int) -> SpatialGrid[V]:
        """Return a copy rotated clockwise by ``quarter_turns`` * 90 degrees.

        The rotation is taken relative to the current extent, so the rotated grid keeps
        the same minimum corner.
        """
        turns = quarter_turns % 4
        if turns == 0 or self._window.is_empty:
            return self.copy()

        origin = self._window.min_coord
        width, height = self._window.size
        if turns % 2 == 1:
            new_size = (height, width)
        else:
            new_size = (width, height)

        def remap(c: Coord) -> Coord:
            rx, ry = c.x - origin.x, c.y - origin.y
            if turns == 1:
                rx, ry = height - 1 - ry, rx
            elif turns == 2:
                rx, ry = width - 1 - rx, height - 1 - ry
            else:
                rx, ry = ry, width - 1 - rx
            return Coord(origin.x + rx, origin.y + ry)

        return self._remapped(remap, origin, new_size)

    def flip(self, horizontal: bool = True) -> SpatialGrid[V]:
        """Return a mirrored copy (left/right when ``horizontal``, else top/bottom)."""
        if self._window.is_empty:
            return self.copy()

        origin = self._window.min_coord
        width, height = self._window.size

        def remap(c: Coord) -> Coord:
            if horizontal:
                return Coord(origin.x + width - 1 - (c.x - origin.x), c.y)
            return Coord(c.x, origin.y + height - 1 - (c.y - origin.y))

        return self._remapped(remap, origin, (width, height))

    def _remapped(
        self,
        remap: Callable[[Coord], Coord],
        origin: Coord,
        size: Tuple[int, int],
    ) -> SpatialGrid[V]:
        grid: SpatialGrid[V] = SpatialGrid(self._default)
        if self._window.fixed:
            grid.fix_window(origin, origin.move(size[0] - 1, size[1] - 1))
        for c, value in self._cells.items():
            grid.set(remap(c), value)
        return grid

    # ------------------------------------------------------------------
    # Sub-regions
    # ------------------------------------------------------------------

    def copy(self) -> SpatialGrid[V]:
        grid: SpatialGrid[V] = SpatialGrid(self._default)
        grid._window = self._window.copy()
        grid._cells = dict(self._cells)
        return grid

    def extract(
        self,
        top_left: Tuple[int, int],
        bottom_right: Tuple[int, int],
        relative: bool = False,
    ) -> SpatialGrid[V]:
        """Copy the entries inside a rectangle into a new grid.

        With ``relative`` the copy is re-keyed so the rectangle's top-left becomes
        (0, 0). A fixed source yields a fixed copy pinned to the rectangle; a dynamic
        source yields a dynamic copy whose window still spans the whole rectangle, so
        ``insert`` places it back cell for cell.
        """
        region = Window.between(top_left, bottom_right)
        corner = region.min_coord
        if relative:
            low, high = Coord(0, 0), corner.diff(region.max_coord)
        else:
            low, high = region.min_coord, region.max_coord

        extracted: SpatialGrid[V] = SpatialGrid(self._default)
        if self._window.fixed:
            extracted.fix_window(low, high)
        else:
            extracted.window.include(low)
            extracted.window.include(high)

        for c, value in self._cells.items():
            if not region.contains(c):
                continue
            extracted.set(corner.diff(c) if relative else c, value)
        return extracted

    def insert(self, offset: Tuple[int, int], source: SpatialGrid[V]) -> None:
        """Overwrite this grid with ``source``, placing its window minimum at ``offset``.

        Every cell of the source footprint replaces the destination cell; source cells
        without a value erase the destination cell instead of leaving it untouched.
        """
        if source.window.is_empty:
            return
        placed: Dict[Coord, V] = {}
        cleared = []
        for coord in source.window:
            target = source.relative(coord).shift(offset)
            cleared.append(target)
            if source.has_value(coord):
                placed[target] = source._cells[coord]

        for target in cleared:
            self._cells.pop(target, None)
        self._window.resize(self._cells.keys())
        for target, value in placed.items():
            self.set(target, value)

    def insert_columns(self, index: int, count: int) -> None:
        """Shift every entry with ``x >= index`` right by ``count`` columns."""
        self._shift_entries(lambda c: c.x >= index, (count, 0))

    def insert_rows(self, index: int, count: int) -> None:
        """Shift every entry with ``y >= index`` down by ``count`` rows."""
        self._shift_entries(lambda c: c.y >= index, (0, count))

    def _shift_entries(self, selector: Callable[[Coord], bool], offset: Tuple[int, int]) -> None:
        # Lift all movers out first so a shifted cell never lands on one still to move
        moving = {c: self._cells.pop(c) for c in [c for c in self._cells if selector(c)]}
        if not moving:
            return
        self._window.resize(self._cells.keys())
        for c, value in moving.items():
            self.set(c.shift(offset), value)

    # ------------------------------------------------------------------
    # Iteration and rows out
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._window)

    def __len__(self) -> int:
        return len(self._cells)

    def to_rows(
        self,
        stringify: Callable[[Optional[V]], str] = str,
        special: Optional[Mapping[Tuple[int, int], str]] = None,
    ) -> List[str]:
        """Render the window row by row; ``special`` overrides individual cells."""
        if self._window.is_empty:
            return []
        overrides = {as_coord(k): v for k, v in (special or {}).items()}
        lo, hi = self._window.min_coord, self._window.max_coord
        rows = []
        for y in range(lo.y, hi.y + 1):
            cells = []
            for x in range(lo.x, hi.x + 1):
                c = Coord(x, y)
                cells.append(overrides[c] if c in overrides else stringify(self.get(c)))
            rows.append("".join(cells))
        return rows

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def __repr__(self) -> str:
        return f"SpatialGrid(default={self._default!r}, window={self._window}, entries={len(self._cells)})"
