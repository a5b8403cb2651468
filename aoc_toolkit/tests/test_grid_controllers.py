import numpy as np
import pytest

from aoc_toolkit.src.core.grid import Grid
from aoc_toolkit.src.core.grid_builder import GridBuilder
from aoc_toolkit.src.search.dijkstra import UNREACHABLE, dijkstra
from aoc_toolkit.src.search.grid_controllers import (
    Direction,
    GridCostController,
    OrientedMazeController,
    WallMazeController,
    best_path_tiles,
    path_overlay,
    trace_path,
)

COST_MAP = [
    "0493432911123",
    "0195450909123",
    "2255240909054",
    "1446580909052",
    "4546650909036",
    "1438510909054",
    "4457809909066",
    "3637810909053",
    "4654961909187",
    "4564672909193",
    "1224680909193",
    "2546540909191",
    "4322671119993",
]


def _cost_grid(lines):
    builder = GridBuilder()
    for line in lines:
        builder.append_digit_map(line)
    return builder.to_grid()


def _walls(lines):
    builder = GridBuilder()
    for line in lines:
        builder.append_bool_map(line, "#")
    return builder.to_grid()


def _reference_costs(cost):
    """Relax every cell until nothing changes."""
    c = cost.to_array(dtype=float)
    dist = np.full(c.shape, np.inf)
    dist[0, 0] = 0
    while True:
        best = dist.copy()
        best[1:, :] = np.minimum(best[1:, :], dist[:-1, :] + c[1:, :])
        best[:-1, :] = np.minimum(best[:-1, :], dist[1:, :] + c[:-1, :])
        best[:, 1:] = np.minimum(best[:, 1:], dist[:, :-1] + c[:, 1:])
        best[:, :-1] = np.minimum(best[:, :-1], dist[:, 1:] + c[:, :-1])
        if np.array_equal(best, dist):
            return dist
        dist = best


def test_grid_maze_dijkstra():
    cost = _cost_grid(COST_MAP)
    controller = GridCostController(cost)
    assert dijkstra(controller) == 48


def test_grid_maze_matches_reference():
    cost = _cost_grid(COST_MAP)
    reference = _reference_costs(cost)
    controller = GridCostController(cost)
    distance = dijkstra(controller)
    assert distance == int(reference[-1, -1])
    for (x, y), (d, _) in controller.path.cells():
        if d >= 0:
            assert d == int(reference[y, x])


def test_grid_maze_path_adds_up():
    cost = _cost_grid(COST_MAP)
    controller = GridCostController(cost)
    distance = dijkstra(controller)
    path = trace_path(controller.previous_grid(), (0, 0), (12, 12))
    assert path[0] == (0, 0)
    assert path[-1] == (12, 12)
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
    assert sum(cost.get(x, y) for x, y in path[1:]) == distance


def test_single_cell_cost_map():
    controller = GridCostController(Grid(1, 1, 9))
    assert dijkstra(controller) == 0


def test_wall_maze_steps_and_unreachable():
    walls = _walls(["...", "##.", "..."])
    controller = WallMazeController(walls, (0, 0), (0, 2))
    assert dijkstra(controller) == 6
    assert trace_path(controller.previous, (0, 0), (0, 2)) == [
        (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2),
    ]

    blocked = walls.copy()
    blocked.set(2, 1, True)
    assert dijkstra(WallMazeController(blocked, (0, 0), (0, 2))) == UNREACHABLE
    # the what-if copy leaves the original map usable
    assert dijkstra(WallMazeController(walls, (0, 0), (0, 2))) == 6


def test_direction_turns():
    assert Direction.UP.turns() == (Direction.LEFT, Direction.RIGHT)
    assert Direction.RIGHT.turns() == (Direction.UP, Direction.DOWN)
    assert Direction.LEFT.delta == (-1, 0)


def test_oriented_maze_turn_cost():
    walls = _walls([
        "#####",
        "#...#",
        "#.#.#",
        "#...#",
        "#####",
    ])
    controller = OrientedMazeController(walls, (1, 3, Direction.RIGHT), (3, 1, Direction.UP))
    assert dijkstra(controller) == 1004
    assert trace_path(controller.previous_grid(), (1, 3), (3, 1)) == [
        (1, 3), (2, 3), (3, 3), (3, 2), (3, 1),
    ]


def test_oriented_maze_any_arrival_orientation():
    walls = _walls(["#####", "#...#", "#####"])
    controller = OrientedMazeController(walls, (1, 1, Direction.RIGHT), (3, 1, Direction.UP))
    # arrives facing right; the zero-cost virtual edge avoids the extra turn
    assert dijkstra(controller) == 2


def test_oriented_maze_reversed():
    walls = _walls(["#####", "#...#", "#####"])
    controller = OrientedMazeController(walls, (1, 1, Direction.RIGHT), (3, 1, Direction.UP))
    dijkstra(controller)
    backward = controller.reversed()
    assert backward.get_starting_node() == (3, 1, Direction.UP)
    assert backward.get_target_node() == (1, 1, Direction.RIGHT)
    assert backward.path.get(3, 1) is None
    # one turn to face left then two steps
    assert dijkstra(backward) == 1002


def test_best_path_tiles_corridor():
    walls = _walls(["#####", "#...#", "#####"])
    forward = OrientedMazeController(walls, (1, 1, Direction.RIGHT), (3, 1, Direction.RIGHT))
    backward = OrientedMazeController(walls, (3, 1, Direction.LEFT), (1, 1, Direction.LEFT))
    best = dijkstra(forward, explore_all=True)
    assert dijkstra(backward, explore_all=True) == best == 2
    tiles = best_path_tiles(forward, backward, best)
    assert tiles.rows() == [
        [False] * 5,
        [False, True, True, True, False],
        [False] * 5,
    ]


def test_trace_path_broken_chain():
    previous = Grid(3, 1, None)
    previous.set(2, 0, (1, 0))
    with pytest.raises(ValueError):
        trace_path(previous, (0, 0), (2, 0))


def test_path_overlay_arrows():
    overlay = path_overlay(3, 2, [(0, 0), (1, 0), (1, 1), (0, 1)])
    assert overlay.rows() == [["S", ">", " "], ["<", "v", " "]]
