"""Grid model: a fixed width x height array of cells.

Storage is column-major (``cells[x][y]``). Each interior wall is recorded on
exactly one cell: the wall between ``(x, y-1)`` and ``(x, y)`` is
``cells[x][y].top_open`` and the wall between ``(x-1, y)`` and ``(x, y)`` is
``cells[x][y].left_open``. Flags on row 0 (top) and column 0 (left) refer to
the outer border and are never emitted.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from ..errors import ConfigError
from .cells import OFFSETS, Cell, Coord2D


class Grid:
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ConfigError(f"maze dimensions must be at least 1x1 (got {width}x{height})", "dimensions")
        self.width = width
        self.height = height
        self.cells: List[List[Cell]] = [[Cell(x, y) for y in range(height)] for x in range(width)]

    def __getitem__(self, loc: Coord2D) -> Cell:
        x, y = loc
        return self.cells[x][y]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbor(self, loc: Coord2D, direction: int) -> Optional[Coord2D]:
        """Return the adjacent coordinate in ``direction`` or None at the grid edge."""
        dx, dy = OFFSETS[direction]
        nx, ny = loc[0] + dx, loc[1] + dy
        if not self.in_bounds(nx, ny):
            return None
        return (nx, ny)

    def iter_cells(self) -> Iterator[Cell]:
        for column in self.cells:
            yield from column

    def _owner(self, a: Coord2D, b: Coord2D):
        """Return (cell, flag_name) holding the wall between a and b."""
        (ax, ay), (bx, by) = a, b
        if ay == by and abs(ax - bx) == 1:
            return self.cells[max(ax, bx)][ay], "left_open"
        if ax == bx and abs(ay - by) == 1:
            return self.cells[ax][max(ay, by)], "top_open"
        raise ValueError(f"cells {a} and {b} are not adjacent")

    def open_wall(self, a: Coord2D, b: Coord2D) -> None:
        cell, flag = self._owner(a, b)
        setattr(cell, flag, True)

    def is_open(self, a: Coord2D, b: Coord2D) -> bool:
        cell, flag = self._owner(a, b)
        return getattr(cell, flag)

    def clear_cell(self, loc: Coord2D) -> None:
        """Open both walls owned by the cell (top and left)."""
        cell = self[loc]
        cell.top_open = True
        cell.left_open = True

    @property
    def cell_count(self) -> int:
        return self.width * self.height


__all__ = ["Grid"]
