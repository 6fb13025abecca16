"""Pydantic schemas for grid snapshots.

These models mirror ``Window`` and ``SpatialGrid`` but keep snapshots serializable
(JSON-safe cell lists instead of tuple-keyed dicts). ``helpers.snapshot_grid`` and
``helpers.restore_grid`` convert between the live structures and these models.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


class WindowState(BaseModel):
    """Bounding window corners plus the fixed/dynamic flag."""

    min_coord: Optional[Tuple[int, int]] = Field(
        None, description="Inclusive top-left corner; None for an empty window",
    )
    max_coord: Optional[Tuple[int, int]] = Field(
        None, description="Inclusive bottom-right corner; None for an empty window",
    )
    fixed: bool = Field(False, description="True when the window is pinned by the caller")

    @model_validator(mode="after")
    def _corners_together(self) -> "WindowState":
        if (self.min_coord is None) != (self.max_coord is None):
            raise ValueError("min_coord and max_coord must both be set or both be None")
        if self.fixed and self.min_coord is None:
            raise ValueError("A fixed window needs both corners")
        return self


class CellState(BaseModel):
    """A single stored grid cell."""

    x: int
    y: int
    value: Any


class GridState(BaseModel):
    """Sparse snapshot of a SpatialGrid."""

    default: Any = Field(None, description="Value synthesized for unstored cells")
    window: WindowState = Field(default_factory=WindowState)
    cells: List[CellState] = Field(
        default_factory=list,
        description="Stored cells in row-major order",
    )
