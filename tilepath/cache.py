"""Bounded FIFO memo of solved paths in front of a grid.

PathCache answers repeated (start, target) queries without searching
again. Entries are kept oldest first and evicted in insertion order once
the cache is full; hits do not move an entry (this is not an LRU).

Invalidation:
- ``disconnect_all`` routed through the cache drops every entry whose
  stored path passes through the disconnected node's position.
- Entries that only name the node as their start are kept, since the
  start position is not part of a stored path.
- Connectivity changes made directly on ``cache.grid`` bypass
  invalidation; call ``invalidate`` or ``clear`` yourself in that case.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .config import Config
from .grid import Grid
from .logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    log_error,
    log_info,
    log_success,
)
from .node import Node
from .position import Position, PositionLike, as_position
from .schemas import CachedPathState, PathCacheState


@dataclass(frozen=True)
class CachedPath:
    """Memoized result keyed by the row-major ids of its endpoints."""

    start_id: int
    target_id: int
    path: Tuple[Position, ...]

    def passes_through(self, position: Position) -> bool:
        return position in self.path


class PathCache:
    """Grid wrapper that memoizes up to ``capacity`` successful searches.

    A capacity of zero is allowed: every lookup misses and nothing is
    retained.
    """

    def __init__(self, grid: Grid, capacity: Optional[int] = None):
        if capacity is None:
            capacity = Config.PATH_CACHE_CAPACITY
        if capacity < 0:
            raise ValueError(f"PathCache capacity must be zero or positive, got {capacity}")
        self.grid = grid
        self.capacity = capacity
        # maxlen makes append drop the oldest entry, so the cache never
        # holds more than ``capacity`` entries, not even transiently.
        self._entries: Deque[CachedPath] = deque(maxlen=capacity)
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Tuple[PositionLike, PositionLike]) -> bool:
        start, target = key
        return self._lookup(self.grid.index_of(start), self.grid.index_of(target)) is not None

    @property
    def entries(self) -> List[CachedPath]:
        """Cached entries, oldest first."""
        return list(self._entries)

    def find_path(self, start: PositionLike, target: PositionLike) -> Optional[List[Position]]:
        """Return a cached path or search the grid and remember the result.

        Failed searches are not cached.

        Raises:
            OutOfBoundsError: If either endpoint is outside the grid
        """
        start_id = self.grid.node_at(start).id
        target_id = self.grid.node_at(target).id

        cached = self._lookup(start_id, target_id)
        if cached is not None:
            self.hits += 1
            if Config.DEBUG_PATHS:
                log_success(f"  {LOG_TAG_SUCCESS} [PathCache] Hit {start_id} -> {target_id}")
            return list(cached.path)

        self.misses += 1
        if Config.DEBUG_PATHS:
            log_info(f"  {LOG_TAG_INFO} [PathCache] Miss {start_id} -> {target_id}, searching grid...")

        path = self.grid.find_path(start, target)
        if path is None:
            return None

        self._insert(CachedPath(start_id=start_id, target_id=target_id, path=tuple(path)))
        return path

    def solve(self, start: PositionLike, target: PositionLike) -> Optional[List[Position]]:
        """``PathSolver`` entry point; same as ``find_path``."""
        return self.find_path(start, target)

    def disconnect_all(self, node: Node) -> None:
        """Disconnect ``node`` on the grid and drop paths through it."""
        self.grid.disconnect_all(node)
        self.invalidate(node.position)

    def invalidate(self, position: PositionLike) -> int:
        """Drop every entry whose path passes through ``position``.

        Returns the number of entries removed.
        """
        position = as_position(position)
        kept = [entry for entry in self._entries if not entry.passes_through(position)]
        dropped = len(self._entries) - len(kept)
        if dropped:
            self._entries = deque(kept, maxlen=self.capacity)
            if Config.DEBUG_PATHS:
                log_error(f"  {LOG_TAG_ERROR} [PathCache] Invalidated {dropped} path(s) through {position}")
        return dropped

    def clear(self) -> None:
        self._entries.clear()

    def to_state(self) -> PathCacheState:
        return PathCacheState(
            capacity=self.capacity,
            entries=[
                CachedPathState(
                    start_id=entry.start_id,
                    target_id=entry.target_id,
                    path=[position.as_tuple() for position in entry.path],
                )
                for entry in self._entries
            ],
            hits=self.hits,
            misses=self.misses,
        )

    def _lookup(self, start_id: int, target_id: int) -> Optional[CachedPath]:
        for entry in self._entries:
            if entry.start_id == start_id and entry.target_id == target_id:
                return entry
        return None

    def _insert(self, entry: CachedPath) -> None:
        if self.capacity and len(self._entries) == self.capacity:
            evicted = self._entries[0]
            if Config.DEBUG_PATHS:
                log_info(
                    f"  {LOG_TAG_INFO} [PathCache] Evicting {evicted.start_id} -> {evicted.target_id}"
                )
        self._entries.append(entry)
