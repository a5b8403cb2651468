from __future__ import annotations

"""Helper utilities for command line solvers."""

import argparse
import logging
import sys
from typing import Iterator, Optional, Sequence, TextIO, Tuple

from aoc_toolkit.src.utils.config_loader import DEBUG_FLAG, VERBOSE_FLAG, RunConfig
from aoc_toolkit.src.utils.logger import get_logger


def build_parser(description: str) -> argparse.ArgumentParser:
    """Return a parser documenting the shared diagnostic flags."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(DEBUG_FLAG, action="store_true", help="Render maps and paths to stderr")
    parser.add_argument(VERBOSE_FLAG, action="store_true", help="Report progress and timings")
    return parser


def setup_run(
    description: str, name: str, argv: Optional[Sequence[str]] = None
) -> Tuple[RunConfig, logging.Logger]:
    """Parse ``argv`` and return the run configuration and a logger.

    Unknown arguments are ignored; the flags count wherever they appear.
    """
    if argv is None:
        argv = sys.argv[1:]
    # Only handles -h; RunConfig matches the flags literally wherever they appear.
    build_parser(description).parse_known_args(list(argv))
    config = RunConfig.from_argv(argv)
    level = logging.DEBUG if config.debug else logging.INFO
    return config, get_logger(f"aoc_toolkit.{name}", level=level)


def iter_input_lines(stream: Optional[TextIO] = None) -> Iterator[str]:
    """Yield non-blank lines of ``stream`` (stdin by default) without newlines."""
    if stream is None:
        stream = sys.stdin
    for line in stream:
        line = line.rstrip("\r\n")
        if line.strip():
            yield line


def print_part(part: int, value: int) -> None:
    print(f"Part {part} = {value}")
