from typing import Tuple

# Direction indices in scan-cycle order; the carver rotates through this cycle.
LEFT = 0
UP = 1
RIGHT = 2
DOWN = 3
DIRECTIONS = (LEFT, UP, RIGHT, DOWN)
OFFSETS = {LEFT: (-1, 0), UP: (0, -1), RIGHT: (1, 0), DOWN: (0, 1)}


class Cell:
    """One maze square. Owns the wall above it and the wall to its left."""
    __slots__ = ("x", "y", "top_open", "left_open", "visited")
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.top_open = False
        self.left_open = False
        self.visited = False


Coord2D = Tuple[int, int]
