"""Walk a ``#`` walled maze from ``S`` to ``E`` read from stdin.

Part 1 counts the fewest unit steps. Part 2 scores a walker that starts
facing east, pays 1 per step forward and 1000 per quarter turn, and may
arrive at ``E`` facing any direction.
"""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence, TextIO, Tuple

from aoc_toolkit.scripts.utils import iter_input_lines, print_part, setup_run
from aoc_toolkit.src.core.grid import Coord, Grid
from aoc_toolkit.src.core.grid_builder import GridBuilder
from aoc_toolkit.src.core.grid_utils import log_grid, render_with_overlay
from aoc_toolkit.src.search.dijkstra import UNREACHABLE, dijkstra
from aoc_toolkit.src.search.grid_controllers import (
    Direction,
    OrientedMazeController,
    WallMazeController,
    best_path_tiles,
    path_overlay,
    trace_path,
)
from aoc_toolkit.src.utils.colors import BLUE, GREEN, RED, WHITE, FG_BRIGHT_COLORS, FG_COLORS
from aoc_toolkit.src.utils.config_loader import print_runtime_config

WALL = "#"
START = "S"
END = "E"


def parse_maze(stream: Optional[TextIO] = None) -> Tuple[Grid[bool], Coord, Coord]:
    """Return the wall map with the start and end cells."""
    builder: GridBuilder[str] = GridBuilder()
    for line in iter_input_lines(stream):
        builder.append_char_map(line)
    chars = builder.to_grid()

    start = chars.find(START)
    end = chars.find(END)
    if start is None or end is None:
        raise ValueError(f"Maze needs both '{START}' and '{END}' cells")

    walls: Grid[bool] = Grid(chars.width, chars.height, False)
    for (x, y), c in chars.cells():
        if c == WALL:
            walls.set(x, y, True)
    return walls, start, end


def _cell_painter(start: Coord, end: Coord):
    def paint(is_wall: bool, mark: str, xy: Tuple[int, int]) -> str:
        if is_wall:
            return f"{FG_COLORS[BLUE]}#"
        if xy == start:
            color = FG_BRIGHT_COLORS[GREEN]
        elif xy == end:
            color = FG_BRIGHT_COLORS[RED]
        else:
            color = FG_BRIGHT_COLORS[WHITE]
        return f"{color}{mark}"

    return paint


def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    config, logger = setup_run("Shortest walks through a walled maze", "wall_maze", argv)
    if config.verbose:
        print_runtime_config(config)

    start_parse = time.perf_counter()
    try:
        walls, start, end = parse_maze(stream)
    except (ValueError, IndexError) as exc:
        logger.error("Invalid input: %s", exc)
        return 1
    elapsed_parse = time.perf_counter() - start_parse

    start_process = time.perf_counter()
    steps = WallMazeController(walls, start, end)
    print_part(1, dijkstra(steps, log=logger))

    # The target orientation is arbitrary: any arrival collapses onto it.
    oriented = OrientedMazeController(
        walls, (start[0], start[1], Direction.RIGHT), (end[0], end[1], Direction.UP)
    )
    score = dijkstra(oriented, explore_all=config.debug, log=logger)
    print_part(2, score)
    elapsed_process = time.perf_counter() - start_process

    if config.debug and score != UNREACHABLE:
        paint = _cell_painter(start, end)
        path = trace_path(oriented.previous_grid(), start, end)
        logger.debug("One of the best paths is:")
        log_grid(logger, render_with_overlay(walls, path_overlay(walls.width, walls.height, path), paint))

        backward = oriented.reversed()
        back_score = dijkstra(backward, explore_all=True, log=logger)
        tiles = best_path_tiles(oriented, backward, max(score, back_score))
        marks: Grid[str] = Grid(walls.width, walls.height, " ")
        for (x, y), on_path in tiles.cells():
            if on_path:
                marks.set(x, y, "@")
        logger.debug("Tiles on best paths (approximate):")
        log_grid(logger, render_with_overlay(walls, marks, paint))

    if config.verbose:
        logger.info("Time taken for parsing: %.6fs", elapsed_parse)
        logger.info("Time taken for processing: %.6fs", elapsed_process)
    return 0


if __name__ == "__main__":
    sys.exit(main())
