"""Grid cell, frontier record and edge types."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

from .position import Position


@dataclass(frozen=True)
class Node:
    """A single grid cell.

    ``id`` is the row-major index of ``position`` under the owning grid's
    size. ``connections`` holds neighbour ids in insertion order without
    duplicates. Nodes are immutable; the grid swaps in a new instance
    whenever connectivity or cost changes.
    """

    id: int
    position: Position
    cost: int = 0
    connections: Tuple[int, ...] = field(default_factory=tuple)

    @staticmethod
    def score(node_a: "Node", node_b: "Node") -> int:
        """Positional heuristic plus the traversal weight of both cells."""
        return Position.score(node_a.position, node_b.position) + node_a.cost + node_b.cost

    def with_cost(self, cost: int) -> "Node":
        return replace(self, cost=cost)

    def is_connected_to(self, other: "Node") -> bool:
        return other.id in self.connections


@dataclass(frozen=True)
class SearchRecord:
    """Frontier entry used by ``Grid.find_path``.

    ``cost`` is computed once when the record is pushed and is kept for
    inspection only; the frontier is a stack and never reorders by it.
    """

    node: Node
    parent: Node
    depth: int
    cost: int


class NodeConnection:
    """Undirected edge between two node ids.

    ``NodeConnection(a, b)`` and ``NodeConnection(b, a)`` compare and hash
    equal, so a set of connections holds each edge once.
    """

    __slots__ = ("a", "b")

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeConnection):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))

    def __repr__(self) -> str:
        return f"NodeConnection({self.a}, {self.b})"

    def is_self_loop(self) -> bool:
        return self.a == self.b

    def ids(self) -> Tuple[int, int]:
        return (min(self.a, self.b), max(self.a, self.b))
