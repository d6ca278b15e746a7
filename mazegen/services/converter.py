"""Tile-to-line stream converter.

Reads generator output (tile-adjacency records) and writes the same walls as
segment endpoints. Output is streamed: records before a bad line have already
been written when the error is raised.
"""
from __future__ import annotations

from typing import Iterable, TextIO, Union

from ..logging_utils import get_logger
from ..utils.wall_format import read_walls, tile_to_line

log = get_logger("convert")


def convert_stream(lines: Iterable[Union[str, bytes]], out: TextIO) -> int:
    """Convert every record in ``lines`` and write it to ``out``.

    Raises ParseError / AdjacencyError on the first bad record.
    """
    count = 0
    for lineno, wall in read_walls(lines):
        out.write(tile_to_line(wall, lineno).format() + "\n")
        count += 1
    log.info(event="convert_complete", walls=count)
    return count


__all__ = ["convert_stream"]
