"""Position value object for grid-based path search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union


# Axis-aligned offsets first, diagonals appended on request. Order matters:
# it becomes the adjacency order of fully connected grids.
_ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, -1), (1, 1), (-1, 1), (1, -1))


@dataclass(frozen=True, order=True)
class Position:
    """Immutable unsigned 2D position on the grid.

    Ordering is lexicographic on ``(x, y)``.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position coordinates must be non-negative, got ({self.x}, {self.y})")

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"

    @classmethod
    def from_tuple(cls, value: Sequence[int]) -> "Position":
        x, y = value
        return cls(int(x), int(y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def neighbours(self, allow_diagonal: bool = False) -> List["Position"]:
        """Return adjacent positions, skipping any with a negative coordinate.

        Upper bounds are not checked here; the grid filters those on lookup.
        """
        offsets = _ORTHOGONAL_OFFSETS + _DIAGONAL_OFFSETS if allow_diagonal else _ORTHOGONAL_OFFSETS

        result: List[Position] = []
        for dx, dy in offsets:
            nx, ny = self.x + dx, self.y + dy
            if nx >= 0 and ny >= 0:
                result.append(Position(nx, ny))
        return result

    @staticmethod
    def score(a: "Position", b: "Position") -> int:
        """Heuristic distance: ``floor(euclidean(a, b)) + 1``.

        Always at least 1, so coincident positions never score zero.
        """
        dx = a.x - b.x
        dy = a.y - b.y
        return math.isqrt(dx * dx + dy * dy) + 1


PositionLike = Union[Position, Tuple[int, int], List[int]]


def as_position(value: PositionLike) -> Position:
    """Normalize a ``Position`` or ``(x, y)`` tuple/list to a ``Position``."""
    if isinstance(value, Position):
        return value
    return Position.from_tuple(value)
