"""Axis-aligned bounding window over integer coordinates.

A dynamic window tracks the componentwise min/max of the coordinates it has been
shown. A fixed window is pinned by the caller and ignores ``include``/``resize``.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from ..errors import WindowUndefinedError
from .coord import Coord, as_coord


class Window:
    """Bounding rectangle with inclusive corners."""

    def __init__(
        self,
        min_coord: Optional[Tuple[int, int]] = None,
        max_coord: Optional[Tuple[int, int]] = None,
        *,
        fixed: bool = False,
    ):
        if (min_coord is None) != (max_coord is None):
            raise ValueError("Window corners must both be set or both be empty")
        if fixed and min_coord is None:
            raise WindowUndefinedError("A fixed window needs both corners")

        self._min: Optional[Coord] = None
        self._max: Optional[Coord] = None
        self._fixed = fixed
        if min_coord is not None and max_coord is not None:
            a, b = as_coord(min_coord), as_coord(max_coord)
            self._min = Coord(min(a.x, b.x), min(a.y, b.y))
            self._max = Coord(max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def of_size(cls, width: int, height: int) -> Window:
        """Fixed window spanning (0, 0) .. (width - 1, height - 1)."""
        if width < 1 or height < 1:
            raise ValueError(f"Window size must be positive (got {width}x{height})")
        return cls(Coord(0, 0), Coord(width - 1, height - 1), fixed=True)

    @classmethod
    def between(cls, corner: Tuple[int, int], other: Tuple[int, int]) -> Window:
        """Fixed window spanning two arbitrary opposite corners."""
        return cls(corner, other, fixed=True)

    @property
    def fixed(self) -> bool:
        return self._fixed

    @property
    def is_empty(self) -> bool:
        return self._min is None

    @property
    def min_coord(self) -> Coord:
        if self._min is None:
            raise WindowUndefinedError("The current window is not defined")
        return self._min

    @property
    def max_coord(self) -> Coord:
        if self._max is None:
            raise WindowUndefinedError("The current window is not defined")
        return self._max

    @property
    def size(self) -> Optional[Coord]:
        """Width and height as a Coord, or None for an empty window."""
        if self._min is None or self._max is None:
            return None
        return Coord(self._max.x - self._min.x + 1, self._max.y - self._min.y + 1)

    def include(self, coord: Tuple[int, int]) -> None:
        """Grow a dynamic window so it covers ``coord``."""
        if self._fixed:
            return
        c = as_coord(coord)
        # First coordinate sets both corners
        if self._min is None or self._max is None:
            self._min = c
            self._max = c
            return
        self._min = Coord(min(self._min.x, c.x), min(self._min.y, c.y))
        self._max = Coord(max(self._max.x, c.x), max(self._max.y, c.y))

    def resize(self, coords: Iterable[Tuple[int, int]]) -> None:
        """Recompute a dynamic window from scratch over ``coords``.

        Shrinking cannot be derived incrementally, so removals that touch the border
        call this with the full live key set. An empty collection clears the window.
        """
        if self._fixed:
            return
        xs = []
        ys = []
        for x, y in coords:
            xs.append(x)
            ys.append(y)
        if not xs:
            self.clear()
            return
        self._min = Coord(min(xs), min(ys))
        self._max = Coord(max(xs), max(ys))

    def clear(self) -> None:
        if self._fixed:
            return
        self._min = None
        self._max = None

    def contains(self, coord: Tuple[int, int]) -> bool:
        lo, hi = self.min_coord, self.max_coord
        x, y = coord
        return lo.x <= x <= hi.x and lo.y <= y <= hi.y

    def on_border(self, coord: Tuple[int, int]) -> bool:
        """True if ``coord`` shares a row or column with one of the window edges."""
        lo, hi = self.min_coord, self.max_coord
        x, y = coord
        return x == lo.x or y == lo.y or x == hi.x or y == hi.y

    def count(self) -> int:
        """Area of the window (inclusive bounds); 0 when empty."""
        size = self.size
        if size is None:
            return 0
        return size.x * size.y

    def copy(self) -> Window:
        clone = Window(fixed=False)
        clone._min, clone._max, clone._fixed = self._min, self._max, self._fixed
        return clone

    def __iter__(self) -> Iterator[Coord]:
        # Row-major: x increases within a row, then y
        if self._min is None or self._max is None:
            return
        lo, hi = self._min, self._max
        for y in range(lo.y, hi.y + 1):
            for x in range(lo.x, hi.x + 1):
                yield Coord(x, y)

    def __len__(self) -> int:
        return self.count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return (self._min, self._max, self._fixed) == (other._min, other._max, other._fixed)

    def __repr__(self) -> str:
        kind = "fixed" if self._fixed else "dynamic"
        return f"Window({self}, {kind})"

    def __str__(self) -> str:
        if self._min is None:
            return "(empty)"
        return f"{self._min}-{self._max}"
