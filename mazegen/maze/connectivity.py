"""Connectivity diagnostics over the open walls of a grid.

Flood fill from a start cell across open internal walls, plus counters used to
check the spanning-tree property after carving.
"""
from __future__ import annotations
from collections import deque
from typing import Iterable, Optional, Set

from .cells import DIRECTIONS, Coord2D
from .grid import Grid


def reachable_cells(grid: Grid, start: Coord2D = (0, 0), closed: Optional[Iterable] = None) -> Set[Coord2D]:
    """Return every cell reachable from ``start``.

    ``closed`` optionally supplies the emitted wall list (tile records); when
    given, passability is decided from that list instead of the grid flags,
    so thinned output can be checked without touching the grid.
    """
    blocked = None
    if closed is not None:
        blocked = set()
        for x1, y1, x2, y2 in closed:
            blocked.add(((x1, y1), (x2, y2)))
            blocked.add(((x2, y2), (x1, y1)))
    visited = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for direction in DIRECTIONS:
            n = grid.neighbor(cur, direction)
            if n is None or n in visited:
                continue
            if blocked is not None:
                passable = (cur, n) not in blocked
            else:
                passable = grid.is_open(cur, n)
            if passable:
                visited.add(n)
                q.append(n)
    return visited


def count_open_walls(grid: Grid) -> int:
    """Count open internal walls (border flags on row 0 / column 0 are ignored)."""
    opened = 0
    for cell in grid.iter_cells():
        if cell.top_open and cell.y > 0:
            opened += 1
        if cell.left_open and cell.x > 0:
            opened += 1
    return opened


def is_perfect(grid: Grid) -> bool:
    """True when the open walls form a spanning tree: connected and cycle free."""
    if count_open_walls(grid) != grid.cell_count - 1:
        return False
    return len(reachable_cells(grid)) == grid.cell_count


__all__ = ["reachable_cells", "count_open_walls", "is_perfect"]
