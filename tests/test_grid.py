"""Tests for grid construction, connectivity and depth-first search."""

import pytest

from tilepath import (
    Grid,
    OutOfBoundsError,
    Position,
    grid_from_tiles,
    is_contiguous_path,
    path_positions,
    undirected_edges,
)


GOLDEN_MAP = [
    [".", ".", "."],
    ["#", "#", "."],
    [".", ".", "."],
]


def make_golden_grid() -> Grid:
    return grid_from_tiles(GOLDEN_MAP)


def test_new_grid_layout():
    grid = Grid.new((4, 3))
    assert grid.size == (4, 3)
    assert len(grid) == 12
    for index, node in enumerate(grid):
        assert node.id == index
        assert node.position == Position(index % 4, index // 4)
        assert node.cost == 0
        assert node.connections == ()


def test_grid_rejects_empty_size():
    with pytest.raises(ValueError):
        Grid.new((0, 3))
    with pytest.raises(ValueError):
        Grid.new((3, 0))


def test_node_at_matches_position_for_every_cell():
    grid = Grid.fully_connected((5, 4))
    for y in range(4):
        for x in range(5):
            node = grid.node_at(Position(x, y))
            assert node.position == Position(x, y)
            assert node.id == y * 5 + x
    # Tuples are accepted too
    assert grid.node_at((2, 3)).id == 17


def test_node_at_out_of_bounds_raises():
    grid = Grid.new((3, 3))
    with pytest.raises(OutOfBoundsError) as excinfo:
        grid.node_at(Position(3, 0))
    assert excinfo.value.position == Position(3, 0)
    assert excinfo.value.size == (3, 3)

    with pytest.raises(OutOfBoundsError):
        grid.node_at((0, 3))
    # It is an IndexError so generic index handling still applies
    with pytest.raises(IndexError):
        grid.node_at((10, 10))


def test_find_node_never_raises():
    grid = Grid.new((2, 2))
    assert grid.find_node((1, 1)).id == 3
    assert grid.find_node((5, 5)) is None


def test_fully_connected_3x3_edges():
    grid = Grid.fully_connected((3, 3))
    edges = undirected_edges(grid)

    assert len(edges) == 12
    assert not any(edge.is_self_loop() for edge in edges)

    expected = set()
    for y in range(3):
        for x in range(3):
            node_id = y * 3 + x
            if x + 1 < 3:
                expected.add((node_id, node_id + 1))
            if y + 1 < 3:
                expected.add((node_id, node_id + 3))
    assert {edge.ids() for edge in edges} == expected

    # Every edge is recorded in both directions
    for node in grid:
        for neighbour in grid.neighbours_of(node):
            assert neighbour.is_connected_to(node)


def test_fully_connected_adjacency_order():
    grid = Grid.fully_connected((3, 3))
    centre = grid.node_at((1, 1))
    # +x, +y, -x, -y
    assert centre.connections == (5, 7, 3, 1)
    assert grid.node_at((0, 0)).connections == (1, 3)


def test_connect_is_directed_and_deduplicated():
    grid = Grid.new((3, 1))
    a, b, c = grid.nodes

    grid.connect(a, [b])
    assert grid.node_at((0, 0)).connections == (1,)
    assert grid.node_at((1, 0)).connections == ()

    # Union with previous connections, first occurrence wins
    grid.connect(a, [c, b, c])
    assert grid.node_at((0, 0)).connections == (1, 2)

    # Stale node objects still resolve to the current entry
    grid.connect(a, [b])
    assert grid.node_at((0, 0)).connections == (1, 2)


def test_set_connections_replaces():
    grid = Grid.fully_connected((2, 2))
    node = grid.node_at((0, 0))
    grid.set_connections(node, [grid.node_at((1, 1))])
    assert grid.node_at((0, 0)).connections == (3,)


def test_set_cost():
    grid = Grid.new((2, 2))
    grid.set_cost(grid.node_at((1, 0)), 4)
    assert grid.node_at((1, 0)).cost == 4
    with pytest.raises(ValueError):
        grid.set_cost(grid.node_at((1, 0)), -1)


def test_disconnect_all_strips_back_references():
    grid = Grid.fully_connected((3, 3))
    centre = grid.node_at((1, 1))

    grid.disconnect_all(centre)

    assert grid.node_at((1, 1)).connections == ()
    for node in grid:
        assert centre.id not in node.connections
    # Untouched edges survive
    assert grid.node_at((0, 0)).connections == (1, 3)
    assert len(undirected_edges(grid)) == 8


def test_golden_map_path():
    grid = make_golden_grid()
    path = grid.find_path(Position(0, 0), Position(0, 2))
    assert path == path_positions([(1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2)])
    assert is_contiguous_path(grid, (0, 0), path)


def test_search_explores_latest_branch_first():
    grid = make_golden_grid()
    # From (1,0) both (2,0) and (0,0) are pushed; (0,0) is a dead end
    assert grid.find_path((1, 0), (2, 1)) == path_positions([(2, 0), (2, 1)])
    # From (2,2) the (2,1) branch is popped before (1,2)
    assert grid.find_path((2, 2), (2, 0)) == path_positions([(2, 1), (2, 0)])


def test_depth_first_on_fully_connected_grid():
    grid = Grid.fully_connected((3, 3))
    path = grid.find_path((0, 0), (2, 2))
    assert path == path_positions([(0, 1), (0, 2), (1, 2), (2, 2)])


def test_depth_first_path_is_not_always_shortest():
    grid = Grid.fully_connected((3, 3))
    # The +y branch is followed to exhaustion before (1,0) is expanded
    path = grid.find_path((0, 0), (2, 1))
    assert path == path_positions([(0, 1), (0, 2), (1, 2), (2, 2), (2, 1)])
    assert is_contiguous_path(grid, (0, 0), path)


def test_parent_is_fixed_at_discovery():
    grid = Grid.fully_connected((3, 3))
    # (1,0) is discovered from the start before the deep branch reaches it
    assert grid.find_path((0, 0), (1, 0)) == [Position(1, 0)]


def test_path_to_self():
    grid = Grid.new((2, 2))
    assert grid.find_path((1, 1), (1, 1)) == [Position(1, 1)]


def test_unreachable_on_unconnected_grid():
    grid = Grid.new((3, 3))
    for start in grid:
        for target in grid:
            if start.position != target.position:
                assert grid.find_path(start.position, target.position) is None


def test_unreachable_across_wall():
    grid = grid_from_tiles(["..#..", "..#..", "..#.."])
    assert grid.find_path((0, 0), (4, 2)) is None
    assert grid.find_path((3, 0), (4, 2)) is not None


def test_search_out_of_bounds_raises():
    grid = Grid.fully_connected((3, 3))
    with pytest.raises(OutOfBoundsError):
        grid.find_path((0, 0), (3, 3))
    with pytest.raises(OutOfBoundsError):
        grid.find_path((5, 0), (0, 0))


def test_solve_matches_find_path():
    grid = make_golden_grid()
    assert grid.solve((0, 0), (0, 2)) == grid.find_path((0, 0), (0, 2))
