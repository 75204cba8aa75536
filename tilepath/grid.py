"""Dense tile grid with explicit connectivity and depth-first path search.

Nodes live in a flat list addressed by their row-major id, so every
"pointer" between cells is just an index. Connectivity is stored as one
directed adjacency list per node; an undirected edge is two directed arcs
and callers add both (``fully_connected`` does this by visiting every
node in turn).

Search is a stack-driven depth-first traversal. Each frontier record
carries a heuristic cost, but the stack discipline alone decides which
branch is explored next: neighbours are pushed in adjacency order and the
most recently discovered branch is followed to exhaustion before
backtracking. Paths are therefore the first depth-first path found, not
necessarily the cheapest one.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .config import Config
from .logging_utils import (
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    log_deterministic,
    log_error,
    log_success,
)
from .node import Node, SearchRecord
from .position import Position, PositionLike, as_position
from .schemas import GridState, NodeState


class OutOfBoundsError(IndexError):
    """Raised when a position lies outside the grid's declared size.

    This signals a broken precondition in the caller, not a recoverable
    search outcome; the engine never catches it.
    """

    def __init__(self, *, position: Position, size: Tuple[int, int]) -> None:
        self.position = position
        self.size = size
        width, height = size
        super().__init__(
            f"Position ({position.x}, {position.y}) is outside the {width}x{height} grid. "
            "Validate coordinates with Grid.in_bounds() before searching."
        )


class Grid:
    """Fixed-size rectangular grid of nodes."""

    def __init__(self, size: Tuple[int, int]):
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.size: Tuple[int, int] = (int(width), int(height))
        # Row-major: id == y * width + x
        self.nodes: List[Node] = [
            Node(id=y * width + x, position=Position(x, y))
            for y in range(height)
            for x in range(width)
        ]

    @classmethod
    def new(cls, size: Tuple[int, int]) -> "Grid":
        """Grid with zero-cost nodes and no connections."""
        return cls(size)

    @classmethod
    def fully_connected(cls, size: Tuple[int, int]) -> "Grid":
        """Grid where every node links to each in-bounds orthogonal neighbour."""
        grid = cls(size)
        for node in list(grid.nodes):
            neighbours = [
                grid.node_at(position)
                for position in node.position.neighbours(allow_diagonal=False)
                if grid.in_bounds(position)
            ]
            grid.connect(node, neighbours)
        return grid

    @classmethod
    def from_state(cls, state: GridState) -> "Grid":
        """Rebuild a grid from a snapshot.

        The snapshot may list only some nodes; cells it omits keep their
        default (no connections, zero cost).
        """
        grid = cls((state.width, state.height))
        total = len(grid.nodes)
        for node_state in state.nodes:
            position = Position.from_tuple(node_state.position)
            if not grid.in_bounds(position):
                raise ValueError(f"Snapshot node {node_state.id} lies outside the grid at {position}")
            expected_id = grid.index_of(position)
            if node_state.id != expected_id:
                raise ValueError(
                    f"Snapshot node at {position} has id {node_state.id}, expected {expected_id}"
                )
            invalid = [cid for cid in node_state.connections if not 0 <= cid < total]
            if invalid:
                raise ValueError(f"Snapshot node {node_state.id} references unknown node ids {invalid}")
            grid.nodes[expected_id] = Node(
                id=expected_id,
                position=position,
                cost=node_state.cost,
                connections=tuple(dict.fromkeys(node_state.connections)),
            )
        return grid

    def to_state(self) -> GridState:
        return GridState(
            width=self.width,
            height=self.height,
            nodes=[
                NodeState(
                    id=node.id,
                    position=node.position.as_tuple(),
                    cost=node.cost,
                    connections=list(node.connections),
                )
                for node in self.nodes
            ],
        )

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def in_bounds(self, position: PositionLike) -> bool:
        position = as_position(position)
        return position.x < self.width and position.y < self.height

    def index_of(self, position: PositionLike) -> int:
        """Row-major id for ``position``. Raises ``OutOfBoundsError``."""
        position = as_position(position)
        if not self.in_bounds(position):
            raise OutOfBoundsError(position=position, size=self.size)
        return position.y * self.width + position.x

    def node_at(self, position: PositionLike) -> Node:
        """Return the node at ``position``. Raises ``OutOfBoundsError``."""
        return self.nodes[self.index_of(position)]

    def find_node(self, position: PositionLike) -> Optional[Node]:
        """Scan for a node at ``position``; ``None`` if there is none."""
        position = as_position(position)
        for node in self.nodes:
            if node.position == position:
                return node
        return None

    def neighbours_of(self, node: Node) -> List[Node]:
        """Connected nodes in adjacency order, using the grid's current entry."""
        current = self.nodes[node.id]
        return [self.nodes[node_id] for node_id in current.connections]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def connect(self, node: Node, neighbours: Iterable[Node]) -> None:
        """Append ``neighbours`` to ``node``'s connections (directed).

        Existing connections are kept and duplicates collapse onto their
        first occurrence. Call again with the roles swapped to make the
        edge traversable in both directions.
        """
        current = self.nodes[node.id]
        merged = dict.fromkeys(current.connections)
        merged.update(dict.fromkeys(neighbour.id for neighbour in neighbours))
        self.nodes[node.id] = replace(current, connections=tuple(merged))

    def set_connections(self, node: Node, neighbours: Iterable[Node]) -> None:
        """Replace ``node``'s connections outright (directed)."""
        current = self.nodes[node.id]
        self.nodes[node.id] = replace(
            current,
            connections=tuple(dict.fromkeys(neighbour.id for neighbour in neighbours)),
        )

    def set_cost(self, node: Node, cost: int) -> None:
        if cost < 0:
            raise ValueError(f"Node cost must be non-negative, got {cost}")
        self.nodes[node.id] = self.nodes[node.id].with_cost(cost)

    def disconnect_all(self, node: Node) -> None:
        """Remove every edge touching ``node``, in both directions.

        Clears the node's own list and strips its id from every other
        node's list.
        """
        for index, entry in enumerate(self.nodes):
            if entry.id == node.id:
                if entry.connections:
                    self.nodes[index] = replace(entry, connections=())
            elif node.id in entry.connections:
                self.nodes[index] = replace(
                    entry,
                    connections=tuple(cid for cid in entry.connections if cid != node.id),
                )

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_path(self, start: PositionLike, target: PositionLike) -> Optional[List[Position]]:
        """Depth-first search from ``start`` to ``target``.

        Returns the positions walked after leaving ``start`` (start
        excluded, target included), or ``None`` when the target is not
        reachable. ``start == target`` yields ``[target]``.

        Raises:
            OutOfBoundsError: If either endpoint is outside the grid
        """
        start_node = self.node_at(start)
        target_node = self.node_at(target)

        if Config.DEBUG_PATHS:
            log_deterministic(
                f"  {LOG_TAG_DETERMINISTIC} [Grid] Searching {start_node.position} -> {target_node.position}..."
            )

        # Maps a discovered position to the node that discovered it. The
        # start maps to itself, which marks the root during reconstruction.
        visited: Dict[Position, Node] = {start_node.position: start_node}
        frontier: List[SearchRecord] = [
            SearchRecord(
                node=start_node,
                parent=start_node,
                depth=0,
                cost=Node.score(start_node, target_node),
            )
        ]

        while frontier:
            record = frontier.pop()

            if record.node.position == target_node.position:
                path = self._reconstruct(visited, record, target_node)
                if Config.DEBUG_PATHS:
                    log_success(
                        f"  {LOG_TAG_SUCCESS} [Grid] Path found: {len(path)} steps, depth {record.depth}"
                    )
                return path

            for neighbour in self.neighbours_of(record.node):
                if neighbour.position in visited:
                    continue
                visited[neighbour.position] = record.node
                frontier.append(
                    SearchRecord(
                        node=neighbour,
                        parent=record.node,
                        depth=record.depth + 1,
                        cost=Node.score(neighbour, target_node),
                    )
                )

        if Config.DEBUG_PATHS:
            log_error(
                f"  {LOG_TAG_ERROR} [Grid] No path from {start_node.position} to {target_node.position} "
                f"({len(visited)} nodes explored)"
            )
        return None

    def solve(self, start: PositionLike, target: PositionLike) -> Optional[List[Position]]:
        """``PathSolver`` entry point; same as ``find_path``."""
        return self.find_path(start, target)

    @staticmethod
    def _reconstruct(visited: Dict[Position, Node], record: SearchRecord, target: Node) -> List[Position]:
        path: List[Position] = []
        current = record.parent
        while visited[current.position].position != current.position:
            path.append(current.position)
            current = visited[current.position]
        path.reverse()
        path.append(target.position)
        return path
