"""Path solver capability shared by grids and caches."""

from __future__ import annotations

from typing import List, Optional, Protocol

from .position import Position, PositionLike


class PathSolver(Protocol):
    """Protocol for anything that can answer a start/target query.

    ``Grid`` searches directly; ``PathCache`` answers from memoized
    results first. Callers that only need paths should depend on this
    protocol rather than on either concrete type.
    """

    def solve(self, start: PositionLike, target: PositionLike) -> Optional[List[Position]]:
        """Return positions from ``start`` to ``target`` (start excluded).

        ``None`` means the target is unreachable; that is a normal outcome,
        not an error.
        """

        ...
