"""Integer 2D coordinates used as grid keys and search states."""

from __future__ import annotations

import re
from typing import List, NamedTuple, Tuple

_COORD_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?$")

# Adjacency offsets: orthogonal first, then diagonals
ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Coord(NamedTuple):
    """Immutable (x, y) pair. Compares and hashes like a plain tuple."""

    x: int
    y: int

    def move(self, dx: int, dy: int) -> Coord:
        return Coord(self.x + dx, self.y + dy)

    def shift(self, offset: Tuple[int, int]) -> Coord:
        """Return this coordinate translated by ``offset``."""
        return Coord(self.x + offset[0], self.y + offset[1])

    def diff(self, other: Tuple[int, int]) -> Coord:
        """Return ``other - self``."""
        return Coord(other[0] - self.x, other[1] - self.y)

    def manhattan(self, other: Tuple[int, int]) -> int:
        return abs(other[0] - self.x) + abs(other[1] - self.y)

    def adjacent(self, diagonals: bool = False) -> List[Coord]:
        """Return the 4 (or 8 with ``diagonals``) neighbouring positions."""
        offsets = ORTHOGONAL + DIAGONAL if diagonals else ORTHOGONAL
        return [Coord(self.x + dx, self.y + dy) for dx, dy in offsets]

    def rotate(self, quarter_turns: int) -> Coord:
        """Rotate about the origin in steps of 90 degrees (screen axes, y down)."""
        turns = quarter_turns % 4
        if turns == 1:
            return Coord(-self.y, self.x)
        if turns == 2:
            return Coord(-self.x, -self.y)
        if turns == 3:
            return Coord(self.y, -self.x)
        return self

    @classmethod
    def parse(cls, text: str) -> Coord:
        """Parse ``"x,y"`` or ``"(x, y)"``."""
        match = _COORD_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid coordinate: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def as_coord(value: Tuple[int, int]) -> Coord:
    """Normalise any (x, y) pair into a Coord."""
    if isinstance(value, Coord):
        return value
    x, y = value
    return Coord(x, y)
