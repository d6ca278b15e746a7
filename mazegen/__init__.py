"""
project: mazegen
module: __init__.py
License: MIT

Perfect maze generator and companion text tools.

The generator carves a spanning-tree maze over a rectangular grid, can
optionally open square rooms and thin the remaining walls, and prints the
surviving internal walls one per line (``wall x1 y1 x2 y2``). The converter
and visualizer services consume that line protocol.
"""

__version__ = "0.2.1"

__all__ = ["__version__"]
