"""Shortest-path search over implicit graphs."""

from .dijkstra import UNREACHABLE, DijkstraController, dijkstra
from .grid_controllers import (
    Direction,
    GridCostController,
    OrientedMazeController,
    WallMazeController,
    best_path_tiles,
    path_overlay,
    trace_path,
)

__all__ = [
    "UNREACHABLE",
    "DijkstraController",
    "dijkstra",
    "Direction",
    "GridCostController",
    "OrientedMazeController",
    "WallMazeController",
    "best_path_tiles",
    "path_overlay",
    "trace_path",
]
