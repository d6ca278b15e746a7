import io

import pytest

from mazegen.errors import AdjacencyError, ConfigError, ParseError
from mazegen.maze import Maze, MazeConfig
from mazegen.services.converter import convert_stream
from mazegen.services.visualizer import WallBoard, render_stream
from mazegen.utils.wall_format import Wall

EMPTY_2X2 = (
    "+---+---+\n"
    "|       |   \n"
    "+   +   +\n"
    "|       |   \n"
    "+---+---+\n"
)


def test_border_is_always_drawn():
    assert render_stream([], width=2, height=2) == EMPTY_2X2
    assert WallBoard(2, 2).render() == EMPTY_2X2


def test_tile_walls_paint_between_cells():
    text = render_stream(["wall 0 0 1 0\n", "wall 1 0 1 1\n"], width=2, height=2)
    assert text == (
        "+---+---+\n"
        "|   |   |   \n"
        "+   +---+\n"
        "|       |   \n"
        "+---+---+\n"
    )


def test_line_walls_paint_segments():
    text = render_stream(["wall 1 0 1 1\n", "wall 1 1 2 1\n"], width=2, height=2, line_format=True)
    assert text == (
        "+---+---+\n"
        "|   |   |   \n"
        "+   +---+\n"
        "|       |   \n"
        "+---+---+\n"
    )


def test_border_walls_in_input_are_harmless():
    text = render_stream(["wall 0 0 1 0\n"], width=2, height=1, line_format=True)
    assert text == "+---+---+\n|       |   \n+---+---+\n"


def test_default_board_size():
    lines = render_stream([]).splitlines()
    assert len(lines) == 2 * 10 + 1
    assert lines[0] == "+---" * 20 + "+"


@pytest.mark.parametrize(
    "cfg",
    [
        MazeConfig(width=20, height=10, seed=1),
        MazeConfig(width=7, height=13, seed=2),
        MazeConfig(width=1, height=6, seed=3),
        MazeConfig(width=15, height=15, num_rooms=3, room_size=3, remove_percentage=20, seed=4),
        MazeConfig.harp(seed=5),
    ],
)
def test_tile_and_converted_line_render_identically(cfg):
    m = Maze(cfg)
    tile_text = render_stream(m.lines(), width=cfg.width, height=cfg.height)
    converted = io.StringIO()
    convert_stream(m.lines(), converted)
    line_text = render_stream(
        converted.getvalue().splitlines(),
        width=cfg.width,
        height=cfg.height,
        line_format=True,
    )
    assert tile_text == line_text


def test_wall_outside_board_is_a_parse_error():
    with pytest.raises(ParseError) as exc:
        render_stream(["wall 0 0 0 1\n", "wall 5 5 5 6\n"], width=2, height=2)
    assert exc.value.code == "bounds"
    assert exc.value.lineno == 2


def test_non_adjacent_wall_rejected():
    board = WallBoard(3, 3)
    with pytest.raises(AdjacencyError):
        board.add(Wall(0, 0, 1, 1))
    with pytest.raises(AdjacencyError):
        board.add(Wall(0, 0, 2, 0), line_format=True)


def test_zero_size_board_rejected():
    with pytest.raises(ConfigError):
        WallBoard(0, 4)
