import io
import logging
import sys

import pytest

from aoc_toolkit.scripts import grid_maze, wall_maze
from aoc_toolkit.scripts.utils import iter_input_lines, setup_run
from aoc_toolkit.src.search.dijkstra import UNREACHABLE

SMALL_COSTS = "199\n119\n911\n"

MAZE = """\
#####
#..E#
#.#.#
#S..#
#####
"""


def test_iter_input_lines_skips_blanks():
    assert list(iter_input_lines(io.StringIO("ab\r\n\n  \ncd\n"))) == ["ab", "cd"]


def test_setup_run_flags():
    config, logger = setup_run("test", "setup_test", ["input.txt", "-d"])
    assert config.debug and not config.verbose
    assert logger.level == logging.DEBUG


def test_grid_maze_part_1(capsys):
    assert grid_maze.main([], io.StringIO(SMALL_COSTS)) == 0
    # down, right, down, right over the ones
    assert capsys.readouterr().out == "Part 1 = 4\n"


def test_grid_maze_debug_renders_path(capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        assert grid_maze.main(["-d"], io.StringIO(SMALL_COSTS)) == 0
    assert capsys.readouterr().out == "Part 1 = 4\n"
    assert any("cheapest" in rec.message for rec in caplog.records)


def test_grid_maze_ragged_input(caplog):
    with caplog.at_level(logging.ERROR):
        assert grid_maze.main([], io.StringIO("123\n12\n")) == 1
    assert any("Invalid input" in rec.message for rec in caplog.records)


def test_grid_maze_empty_input():
    assert grid_maze.main([], io.StringIO("")) == 1


def test_wall_maze_parts(capsys):
    assert wall_maze.main([], io.StringIO(MAZE)) == 0
    assert capsys.readouterr().out == "Part 1 = 4\nPart 2 = 1004\n"


def test_wall_maze_debug_and_verbose(capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        assert wall_maze.main(["-d", "-v"], io.StringIO(MAZE)) == 0
    assert capsys.readouterr().out == "Part 1 = 4\nPart 2 = 1004\n"
    messages = [rec.message for rec in caplog.records]
    assert "One of the best paths is:" in messages
    assert any(m.startswith("Time taken for processing") for m in messages)


def test_wall_maze_unreachable(capsys):
    blocked = "#####\n#S#E#\n#####\n"
    assert wall_maze.main([], io.StringIO(blocked)) == 0
    assert capsys.readouterr().out == f"Part 1 = {UNREACHABLE}\nPart 2 = {UNREACHABLE}\n"


def test_wall_maze_missing_end():
    assert wall_maze.main([], io.StringIO("#####\n#S..#\n#####\n")) == 1


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SMALL_COSTS))
    assert grid_maze.main(["-v"]) == 0
    assert "Part 1 = 4" in capsys.readouterr().out


def test_setup_run_help_lists_flags(capsys):
    with pytest.raises(SystemExit) as excinfo:
        setup_run("Help test", "help_test", ["-h"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "-d" in out and "-v" in out


def test_grid_maze_index_error_during_parse(monkeypatch, caplog):
    def boom(stream):
        raise IndexError("array access 5,0 out of bounds")

    monkeypatch.setattr(grid_maze, "parse_cost_map", boom)
    with caplog.at_level(logging.ERROR):
        assert grid_maze.main([], io.StringIO(SMALL_COSTS)) == 1
    assert any("out of bounds" in rec.message for rec in caplog.records)


def test_wall_maze_index_error_during_parse(monkeypatch, caplog):
    def boom(stream):
        raise IndexError("array access 9,9 out of bounds")

    monkeypatch.setattr(wall_maze, "parse_maze", boom)
    with caplog.at_level(logging.ERROR):
        assert wall_maze.main([], io.StringIO(MAZE)) == 1
    assert any("Invalid input" in rec.message for rec in caplog.records)
