import random
from dataclasses import dataclass
from typing import List

from ..errors import ConfigError
from .grid import Grid


@dataclass
class Room:
    x: int
    y: int
    size: int

    def cells(self):
        for ix in range(self.x, self.x + self.size):
            for iy in range(self.y, self.y + self.size):
                yield ix, iy

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.size and self.y <= y < self.y + self.size


def validate_room_size(width: int, height: int, room_size: int) -> None:
    if room_size > height - 1 or room_size > width - 1:
        raise ConfigError("room size too large for maze", "room_size")


def place_rooms(grid: Grid, num_rooms: int, room_size: int, rng=None) -> List[Room]:
    """Clear ``num_rooms`` square blocks of side ``room_size``.

    Anchors are drawn from [1, dim - room_size] on each axis so the square never
    touches row 0 / column 0 and always fits. Every cell in the square has both
    of its walls opened; rooms may overlap. The size check runs before any
    draw or mutation, so a rejected request leaves the grid untouched.
    """
    validate_room_size(grid.width, grid.height, room_size)
    if rng is None:
        rng = random
    rooms: List[Room] = []
    for _ in range(num_rooms):
        xs = rng.randrange(1, grid.width - room_size + 1)
        ys = rng.randrange(1, grid.height - room_size + 1)
        room = Room(xs, ys, room_size)
        for loc in room.cells():
            grid.clear_cell(loc)
        rooms.append(room)
    return rooms


__all__ = ["Room", "place_rooms", "validate_room_size"]
