"""ASCII maze visualizer.

Builds two wall matrices from a wall list and paints them as text:

    +---+---+
    |       |
    +   +---+
    |       |
    +---+---+

``horizontal[row][col]`` is the segment on the top edge of cell (col, row)
(``height + 1`` rows of ``width``); ``vertical[row][col]`` is the segment on
the left edge of cell (col, row) (``height`` rows of ``width + 1``). The outer
border is always drawn, whether or not the input lists it.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from ..errors import AdjacencyError, ConfigError, ParseError
from ..logging_utils import get_logger
from ..utils.wall_format import Wall, read_walls

log = get_logger("render")

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10


class WallBoard:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if width < 1 or height < 1:
            raise ConfigError(f"maze dimensions must be at least 1x1 (got {width}x{height})", "dimensions")
        self.width = width
        self.height = height
        self.horizontal: List[List[bool]] = [[False] * width for _ in range(height + 1)]
        self.vertical: List[List[bool]] = [[False] * (width + 1) for _ in range(height)]
        for col in range(width):
            self.horizontal[0][col] = True
            self.horizontal[height][col] = True
        for row in range(height):
            self.vertical[row][0] = True
            self.vertical[row][width] = True

    def _set(self, matrix: List[List[bool]], row: int, col: int, wall: Wall, lineno: Optional[int]) -> None:
        if row >= len(matrix) or col >= len(matrix[row]):
            raise ParseError(
                f"wall outside {self.width}x{self.height} maze",
                lineno=lineno,
                line=wall.format(),
                code="bounds",
            )
        matrix[row][col] = True

    def add(self, wall: Wall, line_format: bool = False, lineno: Optional[int] = None) -> None:
        """Record one wall given in tile (default) or line convention."""
        x1, y1, x2, y2 = wall
        if wall.is_vertical_pair:
            if line_format:
                # upright segment at x between rows y and y+1
                self._set(self.vertical, min(y1, y2), x1, wall, lineno)
            else:
                # stacked cells share the lower cell's top edge
                self._set(self.horizontal, max(y1, y2), x1, wall, lineno)
        elif wall.is_horizontal_pair:
            if line_format:
                self._set(self.horizontal, y1, min(x1, x2), wall, lineno)
            else:
                self._set(self.vertical, y1, max(x1, x2), wall, lineno)
        else:
            raise AdjacencyError("bad input, non-adjacent cells", lineno=lineno, line=wall.format(), code="adjacency")

    def render(self) -> str:
        rows = []
        for i in range(self.height):
            rows.append(self._paint_row(True, self.horizontal[i]))
            rows.append(self._paint_row(False, self.vertical[i]))
        rows.append(self._paint_row(True, self.horizontal[self.height]))
        return "\n".join(rows) + "\n"

    @staticmethod
    def _paint_row(is_horiz: bool, walls: List[bool]) -> str:
        if is_horiz:
            return "".join("+---" if w else "+   " for w in walls) + "+"
        return "".join("|   " if w else "    " for w in walls)


def render_stream(
    lines: Iterable[Union[str, bytes]],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    line_format: bool = False,
) -> str:
    """Parse every record in ``lines`` and return the painted maze.

    Nothing is rendered if any line fails; the first ParseError /
    AdjacencyError propagates.
    """
    board = WallBoard(width, height)
    count = 0
    for lineno, wall in read_walls(lines):
        board.add(wall, line_format=line_format, lineno=lineno)
        count += 1
    log.info(event="render_complete", walls=count, width=width, height=height, line_format=line_format)
    return board.render()


__all__ = ["WallBoard", "render_stream", "DEFAULT_WIDTH", "DEFAULT_HEIGHT"]
