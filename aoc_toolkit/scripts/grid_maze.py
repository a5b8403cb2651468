"""Cheapest walk across a map of single-digit costs read from stdin.

Moves go in the four cardinal directions from the top-left to the
bottom-right corner; entering a cell costs its digit.
"""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence, TextIO

from aoc_toolkit.scripts.utils import iter_input_lines, print_part, setup_run
from aoc_toolkit.src.core.grid import Grid
from aoc_toolkit.src.core.grid_builder import GridBuilder
from aoc_toolkit.src.core.grid_utils import log_grid, render_with_overlay
from aoc_toolkit.src.search.dijkstra import UNREACHABLE, dijkstra
from aoc_toolkit.src.search.grid_controllers import GridCostController, path_overlay, trace_path
from aoc_toolkit.src.utils.colors import GREEN, WHITE, colorize
from aoc_toolkit.src.utils.config_loader import print_runtime_config


def parse_cost_map(stream: Optional[TextIO] = None) -> Grid[int]:
    builder: GridBuilder[int] = GridBuilder()
    for line in iter_input_lines(stream):
        builder.append_digit_map(line.strip())
    return builder.to_grid()


def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    config, logger = setup_run("Cheapest path through a digit cost map", "grid_maze", argv)
    if config.verbose:
        print_runtime_config(config)

    start_parse = time.perf_counter()
    try:
        cost = parse_cost_map(stream)
    except (ValueError, IndexError) as exc:
        logger.error("Invalid input: %s", exc)
        return 1
    elapsed_parse = time.perf_counter() - start_parse

    start_process = time.perf_counter()
    controller = GridCostController(cost)
    distance = dijkstra(controller, log=logger)
    print_part(1, distance)
    elapsed_process = time.perf_counter() - start_process

    if config.debug and distance != UNREACHABLE:
        path = trace_path(
            controller.previous_grid(),
            controller.get_starting_node(),
            controller.get_target_node(),
        )
        overlay = path_overlay(cost.width, cost.height, path)
        logger.debug("One of the cheapest paths is:")
        log_grid(
            logger,
            render_with_overlay(
                cost,
                overlay,
                lambda v, c, _xy: colorize(c, GREEN, bright=True) if c != " " else colorize(str(v), WHITE),
            ),
        )

    if config.verbose:
        logger.info("Time taken for parsing: %.6fs", elapsed_parse)
        logger.info("Time taken for processing: %.6fs", elapsed_process)
    return 0


if __name__ == "__main__":
    sys.exit(main())
