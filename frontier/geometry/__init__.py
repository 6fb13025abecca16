"""Coordinate and bounding-window primitives."""

from .coord import Coord, as_coord, ORTHOGONAL, DIAGONAL
from .window import Window

__all__ = [
    "Coord",
    "as_coord",
    "ORTHOGONAL",
    "DIAGONAL",
    "Window",
]
