"""Core grid utilities and data structures."""

from .grid import Coord, Grid
from .grid_builder import GridBuilder
from .grid_utils import log_grid, render_bool_grid, render_grid, render_with_overlay

__all__ = [
    "Coord",
    "Grid",
    "GridBuilder",
    "log_grid",
    "render_bool_grid",
    "render_grid",
    "render_with_overlay",
]
