"""Terminal ANSI color codes."""

from __future__ import annotations

from typing import List

ANSI_RESET = "\x1b[0m"

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

FG_COLORS: List[str] = [f"\x1b[{30 + i}m" for i in range(8)]
FG_BRIGHT_COLORS: List[str] = [f"\x1b[{90 + i}m" for i in range(8)]
BG_COLORS: List[str] = [f"\x1b[{40 + i}m" for i in range(8)]
BG_BRIGHT_COLORS: List[str] = [f"\x1b[{100 + i}m" for i in range(8)]


def colorize(text: str, color: int, bright: bool = False) -> str:
    """Wrap ``text`` in a foreground color and a trailing reset."""
    table = FG_BRIGHT_COLORS if bright else FG_COLORS
    return f"{table[color]}{text}{ANSI_RESET}"


__all__ = [
    "ANSI_RESET",
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "FG_COLORS",
    "FG_BRIGHT_COLORS",
    "BG_COLORS",
    "BG_BRIGHT_COLORS",
    "colorize",
]
