"""Utilities for building and checking grids."""

from __future__ import annotations

from typing import List, Sequence, Set

from .grid import Grid
from .node import Node, NodeConnection
from .position import Position, PositionLike, as_position


def grid_from_tiles(tiles: Sequence[Sequence[str]], *, passable: str = ".") -> Grid:
    """Build a grid from rows of tile markers.

    ``tiles[y][x]`` describes the cell at ``(x, y)``; rows may be strings
    (``"..#"``) or lists of single markers. Every passable cell is
    connected to its passable orthogonal neighbours, in neighbour order
    (+x, +y, -x, -y). Blocked cells get no connections.

    Raises:
        ValueError: If ``tiles`` is empty or rows differ in length
    """
    if not tiles or not tiles[0]:
        raise ValueError("Tile map must contain at least one row and one column")

    width = len(tiles[0])
    for row_index, row in enumerate(tiles):
        if len(row) != width:
            raise ValueError(
                f"Tile map rows must all have width {width}; row {row_index} has {len(row)}"
            )

    grid = Grid.new((width, len(tiles)))

    def is_passable(position: Position) -> bool:
        return grid.in_bounds(position) and tiles[position.y][position.x] == passable

    for node in list(grid):
        if not is_passable(node.position):
            continue
        neighbours = [
            grid.node_at(position)
            for position in node.position.neighbours(allow_diagonal=False)
            if is_passable(position)
        ]
        grid.connect(node, neighbours)
    return grid


def undirected_edges(grid: Grid) -> Set[NodeConnection]:
    """Return each connection of ``grid`` once, regardless of direction."""
    edges: Set[NodeConnection] = set()
    for node in grid:
        for neighbour_id in node.connections:
            edges.add(NodeConnection(node.id, neighbour_id))
    return edges


def is_contiguous_path(grid: Grid, start: PositionLike, path: Sequence[PositionLike]) -> bool:
    """Check that each step of ``path`` follows a connection from the previous cell.

    ``path`` excludes ``start``, matching the output of ``Grid.find_path``.
    Out-of-bounds steps make the path invalid rather than raising.
    """
    current: Node = grid.node_at(start)
    for step in path:
        position = as_position(step)
        if not grid.in_bounds(position):
            return False
        following = grid.node_at(position)
        if not current.is_connected_to(following):
            return False
        current = following
    return True


def path_cost(grid: Grid, start: PositionLike, path: Sequence[PositionLike]) -> int:
    """Sum ``Node.score`` over consecutive steps of ``path``.

    Raises:
        OutOfBoundsError: If ``start`` or any step is outside the grid
    """
    total = 0
    previous = grid.node_at(start)
    for step in path:
        node = grid.node_at(step)
        total += Node.score(previous, node)
        previous = node
    return total


def path_positions(path: Sequence[PositionLike]) -> List[Position]:
    """Normalize a sequence of tuples/positions to ``Position`` objects."""
    return [as_position(step) for step in path]
