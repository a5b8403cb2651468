"""Ready-made Dijkstra controllers over grid maps."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from ..core.grid import Coord, Grid
from .dijkstra import DijkstraController

CARDINAL_DELTAS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# (distance, predecessor cell)
CellRecord = Tuple[int, Optional[Coord]]


class Direction(Enum):
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Coord:
        return self.value

    def turns(self) -> Tuple["Direction", "Direction"]:
        """Return the two directions reached by a 90 degree rotation."""
        if self in (Direction.UP, Direction.DOWN):
            return Direction.LEFT, Direction.RIGHT
        return Direction.UP, Direction.DOWN


OrientedNode = Tuple[int, int, Direction]


class GridCostController(DijkstraController[Coord]):
    """Cheapest walk from the top-left to the bottom-right corner.

    Moves go in the four cardinal directions and cost the value of the cell
    entered. Finalised distances and predecessors are kept in ``path``.
    """

    def __init__(self, cost: Grid[int]) -> None:
        self.cost = cost
        self.path: Grid[CellRecord] = Grid(cost.width, cost.height, (-1, None))

    def get_starting_node(self) -> Coord:
        return (0, 0)

    def get_target_node(self) -> Coord:
        return (self.cost.width - 1, self.cost.height - 1)

    def get_neighbors_distances(self, node: Coord) -> List[Tuple[Coord, int]]:
        x, y = node
        neighbors: List[Tuple[Coord, int]] = []
        for dx, dy in CARDINAL_DELTAS:
            value = self.cost.checked_get(x + dx, y + dy)
            if value is not None:
                neighbors.append(((x + dx, y + dy), value))
        return neighbors

    def mark_visited_distance(self, node: Coord, distance: int, previous: Optional[Coord]) -> None:
        self.path.set(node[0], node[1], (distance, previous))

    def previous_grid(self) -> Grid[Optional[Coord]]:
        prev: Grid[Optional[Coord]] = Grid(self.path.width, self.path.height, None)
        for (x, y), (_, p) in self.path.cells():
            prev.set(x, y, p)
        return prev


class WallMazeController(DijkstraController[Coord]):
    """Unit-cost walk between two cells of a map where ``True`` is a wall."""

    def __init__(self, walls: Grid[bool], start: Coord, target: Coord) -> None:
        self.walls = walls
        self.start = start
        self.target = target
        self.previous: Grid[Optional[Coord]] = Grid(walls.width, walls.height, None)

    def get_starting_node(self) -> Coord:
        return self.start

    def get_target_node(self) -> Coord:
        return self.target

    def get_neighbors_distances(self, node: Coord) -> List[Tuple[Coord, int]]:
        x, y = node
        neighbors: List[Tuple[Coord, int]] = []
        for dx, dy in CARDINAL_DELTAS:
            # None (outside) and True (wall) are both blocked
            if self.walls.checked_get(x + dx, y + dy) is False:
                neighbors.append(((x + dx, y + dy), 1))
        return neighbors

    def mark_visited_distance(self, node: Coord, distance: int, previous: Optional[Coord]) -> None:
        self.previous.set(node[0], node[1], previous)


class OrientedMazeController(DijkstraController[OrientedNode]):
    """Walk a wall map where moving forward and turning in place both cost.

    Nodes are ``(x, y, direction)``. The target is reached whatever the
    final orientation: from any node on the target cell the only neighbour
    is the canonical target node, at zero cost.

    ``path`` records, per cell, the distance and predecessor cell of the
    first orientation finalised there. Rotations in place therefore never
    overwrite the cell a tile was entered from.
    """

    def __init__(
        self,
        walls: Grid[bool],
        start: OrientedNode,
        target: OrientedNode,
        forward_cost: int = 1,
        turn_cost: int = 1000,
    ) -> None:
        self.walls = walls
        self.start = start
        self.target = target
        self.forward_cost = forward_cost
        self.turn_cost = turn_cost
        self.path: Grid[Optional[CellRecord]] = Grid(walls.width, walls.height, None)

    def reversed(self) -> "OrientedMazeController":
        """Return a fresh controller searching from the target to the start."""
        return OrientedMazeController(
            self.walls, self.target, self.start, self.forward_cost, self.turn_cost
        )

    def get_starting_node(self) -> OrientedNode:
        return self.start

    def get_target_node(self) -> OrientedNode:
        return self.target

    def get_neighbors_distances(self, node: OrientedNode) -> List[Tuple[OrientedNode, int]]:
        x, y, direction = node
        if (x, y) == self.target[:2]:
            return [(self.target, 0)]

        neighbors: List[Tuple[OrientedNode, int]] = []
        dx, dy = direction.delta
        if self.walls.checked_get(x + dx, y + dy) is False:
            neighbors.append(((x + dx, y + dy, direction), self.forward_cost))
        for turned in direction.turns():
            neighbors.append(((x, y, turned), self.turn_cost))
        return neighbors

    def mark_visited_distance(
        self, node: OrientedNode, distance: int, previous: Optional[OrientedNode]
    ) -> None:
        x, y, _ = node
        if self.path.get(x, y) is not None:
            return
        prev_cell = (previous[0], previous[1]) if previous is not None else None
        self.path.set(x, y, (distance, prev_cell))

    def previous_grid(self) -> Grid[Optional[Coord]]:
        prev: Grid[Optional[Coord]] = Grid(self.path.width, self.path.height, None)
        for (x, y), record in self.path.cells():
            if record is not None:
                prev.set(x, y, record[1])
        return prev


def trace_path(previous: Grid[Optional[Coord]], start: Coord, end: Coord) -> List[Coord]:
    """Walk predecessors back from ``end`` and return the cells from ``start``."""
    path = [end]
    node = end
    while node != start:
        prev = previous.get(node[0], node[1])
        if prev is None:
            raise ValueError("Following path from end doesn't reach start")
        node = prev
        path.append(node)
        if len(path) > previous.width * previous.height:
            raise ValueError("Predecessor chain loops without reaching start")
    path.reverse()
    return path


def path_overlay(width: int, height: int, path: List[Coord]) -> Grid[str]:
    """Return a grid with arrows along ``path`` and ``S`` on its first cell."""
    overlay: Grid[str] = Grid(width, height, " ")
    for prev, node in zip(path, path[1:]):
        if node[0] > prev[0]:
            c = ">"
        elif node[0] < prev[0]:
            c = "<"
        elif node[1] > prev[1]:
            c = "v"
        elif node[1] < prev[1]:
            c = "^"
        else:
            c = "?"
        overlay.set(node[0], node[1], c)
    if path:
        overlay.set(path[0][0], path[0][1], "S")
    return overlay


def best_path_tiles(
    forward: OrientedMazeController, backward: OrientedMazeController, best: int
) -> Grid[bool]:
    """Mark cells lying on some best path, from searches run in both directions.

    A cell is kept when its forward and backward distances add up to
    ``best``, or to ``best`` plus one turn (tiles between two corners). The
    per-cell records drop the orientation, so this is an approximation that
    can over- or under-count on some maps.
    """
    tiles: Grid[bool] = Grid(forward.path.width, forward.path.height, False)
    for (x, y), fwd in forward.path.cells():
        bwd = backward.path.get(x, y)
        if fwd is None or bwd is None:
            continue
        summed = fwd[0] + bwd[0]
        if summed in (best, best + forward.turn_cost):
            tiles.set(x, y, True)
    return tiles


__all__ = [
    "CARDINAL_DELTAS",
    "Direction",
    "GridCostController",
    "WallMazeController",
    "OrientedMazeController",
    "trace_path",
    "path_overlay",
    "best_path_tiles",
]
