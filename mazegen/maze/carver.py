"""Randomized recursive backtracker.

Carves a spanning tree over the grid: every cell is visited exactly once and
exactly ``cells - 1`` walls are opened, so the result is connected and has a
single path between any two cells.

The recursion is unrolled onto an explicit stack. The top of the stack plays
the role of the active call frame: each time control is "returned" to it a
fresh direction scan is made, so the sequence of RNG draws is the same as the
recursive formulation and a given seed yields the same maze.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..logging_utils import get_logger
from .cells import DIRECTIONS, Coord2D
from .grid import Grid

log = get_logger("maze.carver")


def direction_scan(rng, mode: str = "rotate") -> Sequence[int]:
    """Return the order in which the four directions are tried for one scan.

    ``rotate`` picks a random starting direction and walks the fixed cycle
    (left, up, right, down) from it. ``shuffle`` uses a full random permutation.
    Either way exactly one scan consumes RNG state.
    """
    if mode == "shuffle":
        order = list(DIRECTIONS)
        rng.shuffle(order)
        return order
    r = rng.randrange(4)
    return DIRECTIONS[r:] + DIRECTIONS[:r]


def find_unvisited_neighbor(grid: Grid, loc: Coord2D, rng, mode: str = "rotate") -> Optional[Coord2D]:
    for direction in direction_scan(rng, mode):
        n = grid.neighbor(loc, direction)
        if n is not None and not grid[n].visited:
            return n
    return None


def pick_start(grid: Grid, rng) -> Coord2D:
    return (rng.randrange(grid.width), rng.randrange(grid.height))


def carve(grid: Grid, rng=None, start: Optional[Coord2D] = None, mode: str = "rotate") -> int:
    """Carve a perfect maze into ``grid`` in place. Returns the number of walls opened."""
    if rng is None:
        rng = random.Random()
    if start is None:
        start = pick_start(grid, rng)
    if not grid.in_bounds(*start):
        raise IndexError(f"start cell {start} outside {grid.width}x{grid.height} grid")
    grid[start].visited = True
    stack: List[Coord2D] = [start]
    opened = 0
    max_depth = 1
    while stack:
        current = stack[-1]
        chosen = find_unvisited_neighbor(grid, current, rng, mode)
        if chosen is None:
            stack.pop()  # backtrack
            continue
        grid.open_wall(current, chosen)
        grid[chosen].visited = True
        stack.append(chosen)
        opened += 1
        if len(stack) > max_depth:
            max_depth = len(stack)
    log.debug(event="carve_complete", start=f"{start[0]},{start[1]}", opened=opened, max_depth=max_depth)
    return opened


__all__ = ["carve", "direction_scan", "find_unvisited_neighbor", "pick_start"]
