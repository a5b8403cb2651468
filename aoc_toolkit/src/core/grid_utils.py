from __future__ import annotations

"""Text rendering of grids for diagnostics."""

import logging
from typing import Any, Callable, List, Tuple

from .grid import Grid
from ..utils.colors import ANSI_RESET


def _header(grid: Grid[Any]) -> str:
    return f"[{grid.width},{grid.height}] = "


def render_grid(grid: Grid[Any], func: Callable[[Any], str] = str, sep: str = " ") -> str:
    """Return ``grid`` as text, one bracketed line per row."""
    lines: List[str] = [_header(grid)]
    for y in range(grid.height):
        lines.append("[" + sep.join(func(v) for v in grid.row(y)) + "]")
    return "\n".join(lines)


def render_bool_grid(grid: Grid[bool], true_char: str = "*", false_char: str = ".") -> str:
    """Render a boolean grid with one character per cell."""
    return render_grid(grid, lambda b: true_char if b else false_char, sep="")


def render_with_overlay(
    grid: Grid[Any],
    overlay: Grid[Any],
    func: Callable[[Any, Any, Tuple[int, int]], str],
) -> str:
    """Render ``grid`` using a second same-size grid for extra information.

    ``func`` receives ``(value, overlay_value, (x, y))``. Every line ends with
    an ANSI reset so colored cells do not bleed into the next line.
    """
    if grid.shape() != overlay.shape():
        raise ValueError(
            f"Overlay shape {overlay.shape()} does not match grid shape {grid.shape()}"
        )
    lines: List[str] = [_header(grid)]
    for y in range(grid.height):
        text = "".join(
            func(grid.get(x, y), overlay.get(x, y), (x, y)) for x in range(grid.width)
        )
        lines.append(f"[{text}{ANSI_RESET}]")
    return "\n".join(lines)


def log_grid(logger: logging.Logger, text: str, level: int = logging.DEBUG) -> None:
    """Emit a rendered grid line by line."""
    for line in text.splitlines():
        logger.log(level, line)


__all__ = ["render_grid", "render_bool_grid", "render_with_overlay", "log_grid"]
