"""Pydantic schemas for engine snapshots.

These models mirror ``Grid`` and ``PathCache`` so their state can be
inspected, compared and serialized. They describe engine state only
(ids, positions, adjacency), not any external tile-map format.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class NodeState(BaseModel):
    """A single cell as stored in a grid snapshot."""

    id: int = Field(..., ge=0, description="Row-major index of the cell")
    position: Tuple[int, int]
    cost: int = Field(0, ge=0, description="Per-cell traversal weight")
    connections: List[int] = Field(
        default_factory=list,
        description="Ids of connected cells, in adjacency order",
    )

    @field_validator("position")
    @classmethod
    def _non_negative(cls, value: Tuple[int, int]) -> Tuple[int, int]:
        if value[0] < 0 or value[1] < 0:
            raise ValueError(f"position must be non-negative, got {value}")
        return value


class GridState(BaseModel):
    """Snapshot of a grid.

    ``nodes`` may cover only part of the grid (a partial snapshot); use
    ``find_node`` rather than indexing by id.
    """

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    nodes: List[NodeState] = Field(default_factory=list)

    def find_node(self, position: Tuple[int, int]) -> Optional[NodeState]:
        for node in self.nodes:
            if tuple(node.position) == tuple(position):
                return node
        return None


class CachedPathState(BaseModel):
    """One memoized search result."""

    start_id: int
    target_id: int
    path: List[Tuple[int, int]]


class PathCacheState(BaseModel):
    """Snapshot of a path cache, entries oldest first."""

    capacity: int = Field(..., ge=0)
    entries: List[CachedPathState] = Field(default_factory=list)
    hits: int = 0
    misses: int = 0
