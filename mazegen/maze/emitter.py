"""Serialize the remaining internal walls of a grid as tile-format records."""
from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from ..utils.wall_format import Wall
from .grid import Grid


def iter_walls(grid: Grid) -> Iterator[Wall]:
    """Yield every closed internal wall, column-major (x outer, y inner).

    For each cell the wall above it comes before the wall to its left. Border
    walls (row 0 top, column 0 left) are implicit and never yielded.
    """
    for x in range(grid.width):
        for y in range(grid.height):
            cell = grid.cells[x][y]
            if not cell.top_open and y > 0:
                yield Wall(x, y - 1, x, y)
            if not cell.left_open and x > 0:
                yield Wall(x - 1, y, x, y)


def write_walls(walls: Iterable[Wall], stream: TextIO) -> int:
    count = 0
    for wall in walls:
        stream.write(wall.format() + "\n")
        count += 1
    return count


__all__ = ["iter_walls", "write_walls"]
