"""Pipeline orchestration for maze generation.

Provides the public Maze class. Phases run in a fixed order and share a single
RNG handle, so a seed reproduces the maze only when the phase order and the
number of draws per phase are unchanged:

    validate -> grid -> carve -> rooms (optional) -> collect walls
             -> sample (optional) -> ready for emission
"""
from __future__ import annotations

import random
import time
from dataclasses import replace
from typing import Any, Dict, List, Optional, TextIO, Tuple

from ..logging_utils import get_logger
from ..utils.wall_format import Wall
from .carver import carve
from .cells import Coord2D
from .config import MazeConfig
from .emitter import iter_walls, write_walls
from .grid import Grid
from .metrics import init_metrics
from .rooms import Room, place_rooms
from .sampler import plan, sample_walls

log = get_logger("maze")


class Maze:
    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
        start: Coord2D | None = None,
        rng=None,
    ):
        # Accept either a config object or (seed, size) keywords; the caller's
        # config is copied, never modified
        config = replace(config) if config is not None else MazeConfig()
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size[0], size[1]
        # Nothing is allocated or drawn until the parameters are known to be good
        config.validate()
        if config.seed is None:
            config.seed = random.randint(0, 2**31 - 1)
        self.config = config
        self.seed = config.seed
        self._rng = rng if rng is not None else random.Random(config.seed)
        self.grid = Grid(config.width, config.height)
        self.start = start
        self.rooms: List[Room] = []
        self.walls: List[Wall] = []
        self.metrics: Dict[str, Any] = init_metrics()
        self._run_pipeline()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _run_pipeline(self):
        start = time.perf_counter()
        phase_times = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r

        cfg = self.config
        log.info(
            event="maze_generate",
            width=cfg.width,
            height=cfg.height,
            seed=self.seed,
            rooms=cfg.num_rooms,
            room_size=cfg.room_size,
            remove_percentage=cfg.remove_percentage,
        )
        opened = _phase("carve", carve, self.grid, self._rng, self.start, cfg.direction_order)
        if cfg.num_rooms > 0:
            self.rooms = _phase("rooms", place_rooms, self.grid, cfg.num_rooms, cfg.room_size, self._rng)
            log.info(event="rooms_placed", rooms=len(self.rooms), size=cfg.room_size)
        walls = list(iter_walls(self.grid))
        closed = len(walls)
        dropped = 0
        if cfg.remove_percentage > 0:
            sample_plan = plan(cfg.width, cfg.height, cfg.remove_percentage, cfg.num_rooms, cfg.room_size)
            walls, dropped = _phase("sample", sample_walls, walls, sample_plan, self._rng)
            self.metrics['sample_range'] = sample_plan.estimated_range
            self.metrics['sample_limit'] = sample_plan.limit
        self.walls = walls

        self.metrics['seed'] = self.seed
        self.metrics['cells'] = self.grid.cell_count
        self.metrics['walls_opened'] = opened
        self.metrics['rooms_placed'] = len(self.rooms)
        self.metrics['room_cells_cleared'] = len({loc for room in self.rooms for loc in room.cells()})
        self.metrics['walls_closed'] = closed
        self.metrics['walls_thinned'] = dropped
        self.metrics['walls_emitted'] = len(walls)
        self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        self.metrics['phase_ms'] = phase_times

    def lines(self) -> List[str]:
        return [w.format() for w in self.walls]

    def emit(self, stream: TextIO) -> int:
        """Write the wall list to ``stream``; returns the number of records."""
        count = write_walls(self.walls, stream)
        log.info(event="maze_emit", walls=count, thinned=self.metrics['walls_thinned'])
        return count


def generate(config: Optional[MazeConfig] = None, **kwargs) -> Maze:
    return Maze(config, **kwargs)


__all__ = ["Maze", "generate"]
