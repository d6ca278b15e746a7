"""Public maze package interface.

Core generation (grid, carver, rooms, sampler, emitter) plus the Maze
pipeline class that runs them in order.
"""

from .cells import DOWN, LEFT, RIGHT, UP, Cell  # noqa: F401
from .config import MazeConfig  # noqa: F401
from .grid import Grid  # noqa: F401
from .pipeline import Maze, generate  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "Grid",
    "Cell",
    "generate",
    "LEFT",
    "UP",
    "RIGHT",
    "DOWN",
]
