"""Wall density sampler.

Re-opens a share of the walls that survived carving so the maze gains loops
and alternate routes. The decision is made per wall at emission time and the
grid itself is not modified.

The removal is statistical. The number of closed walls is estimated as
``0.9 * width * height`` minus the cells cleared by rooms, the percentage is
turned into a ``limit`` inside that range, and each closed wall survives when
a uniform draw from ``[0, range)`` lands at or above ``limit``. The estimate
can drift from the true wall count (large rooms, small grids); it only sets
the per-wall probability, never an exact number of removals.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple, Tuple

from ..logging_utils import get_logger
from ..utils.wall_format import Wall

log = get_logger("maze.sampler")

CLOSED_WALL_FACTOR = 0.9


class SamplePlan(NamedTuple):
    estimated_range: int
    limit: int


def _approx_closed(width: int, height: int, num_rooms: int, room_size: int) -> float:
    approx = CLOSED_WALL_FACTOR * width * height
    approx -= room_size * room_size * num_rooms
    # randrange needs a non-empty interval
    return max(1.0, approx)


def estimate_range(width: int, height: int, num_rooms: int = 0, room_size: int = 0) -> int:
    return int(_approx_closed(width, height, num_rooms, room_size))


def plan(width: int, height: int, remove_percentage: float, num_rooms: int = 0, room_size: int = 0) -> SamplePlan:
    approx = _approx_closed(width, height, num_rooms, room_size)
    rng_range = int(approx)
    # limit comes from the unfloored estimate; only the draw bound is an integer
    limit = int(approx * remove_percentage / 100.0)
    log.debug(
        event="wall_sampling",
        range=rng_range,
        limit=limit,
        num_rooms=num_rooms,
        room_size=room_size,
    )
    return SamplePlan(rng_range, limit)


def thin_walls(walls: Iterable[Wall], sample_plan: SamplePlan, rng) -> Iterator[Wall]:
    """Yield the walls that stay closed; one RNG draw per input wall."""
    for wall in walls:
        if rng.randrange(sample_plan.estimated_range) >= sample_plan.limit:
            yield wall


def sample_walls(walls: Iterable[Wall], sample_plan: SamplePlan, rng) -> Tuple[List[Wall], int]:
    """Materialize ``thin_walls``; returns (kept, dropped_count)."""
    candidates = list(walls)
    kept = list(thin_walls(candidates, sample_plan, rng))
    return kept, len(candidates) - len(kept)


__all__ = ["SamplePlan", "estimate_range", "plan", "thin_walls", "sample_walls", "CLOSED_WALL_FACTOR"]
