"""Codec for the wall line protocol.

One record per line, whitespace separated::

    wall x1 y1 x2 y2

Two coordinate conventions share this shape:

  - tile: (x1, y1) and (x2, y2) are the two grid-adjacent cells the wall
    separates (what the generator prints).
  - line: (x1, y1) and (x2, y2) are the corner endpoints of the unit wall
    segment (what the converter prints).

Limitations:
  - Coordinates are non-negative integers.
  - Parsing is strict; the first bad line aborts the stream.
  - Input must be UTF-8.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Optional, Tuple, Union

from ..errors import AdjacencyError, ParseError

KEYWORD = "wall"


class Wall(NamedTuple):
    x1: int
    y1: int
    x2: int
    y2: int

    def format(self) -> str:
        return f"{KEYWORD} {self.x1} {self.y1} {self.x2} {self.y2}"

    @property
    def is_vertical_pair(self) -> bool:
        """Same column, rows differ by one (cells stacked / segment upright)."""
        return self.x1 == self.x2 and abs(self.y1 - self.y2) == 1

    @property
    def is_horizontal_pair(self) -> bool:
        """Same row, columns differ by one (cells side by side / segment flat)."""
        return self.y1 == self.y2 and abs(self.x1 - self.x2) == 1


def parse_wall(line: str, lineno: Optional[int] = None) -> Wall:
    """Parse one ``wall x1 y1 x2 y2`` record.

    Args:
        line: Raw input line; trailing whitespace / newline is ignored.
        lineno: 1-based line number used in error messages.

    Raises:
        ParseError: wrong token count, wrong keyword, or a coordinate that
            is not a non-negative integer.
    """
    raw = line.rstrip("\r\n")
    tokens = raw.split()
    if len(tokens) != 5 or tokens[0] != KEYWORD:
        raise ParseError('bad input, expecting "wall x1 y1 x2 y2"', lineno=lineno, line=raw, code="tokens")
    coords = []
    for tok in tokens[1:]:
        if not (tok.isascii() and tok.isdigit()):
            raise ParseError(f"bad input, {tok!r} is not a non-negative integer", lineno=lineno, line=raw, code="coordinate")
        coords.append(int(tok))
    return Wall(*coords)


def _decode(raw: bytes, lineno: int) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"bad input, invalid UTF-8 at byte {e.start}",
            lineno=lineno,
            line=raw.decode("utf-8", "replace"),
            code="encoding",
        ) from None


def read_walls(lines: Iterable[Union[str, bytes]]) -> Iterator[Tuple[int, Wall]]:
    """Yield ``(lineno, Wall)`` pairs from an iterable of lines.

    Accepts text lines or raw byte lines (a binary stream); bytes are decoded
    as UTF-8 one line at a time so an undecodable line is reported with its
    own number. A text stream that fails to decode is reported at the line
    it was reading.
    """
    it = iter(lines)
    lineno = 0
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise ParseError(f"bad input, invalid UTF-8 ({e.reason})", lineno=lineno + 1, code="encoding") from None
        lineno += 1
        if isinstance(line, bytes):
            line = _decode(line, lineno)
        yield lineno, parse_wall(line, lineno)


def tile_to_line(wall: Wall, lineno: Optional[int] = None) -> Wall:
    """Rewrite a tile-adjacency record as the endpoints of its wall segment.

    Cells stacked vertically share a horizontal segment on the lower cell's
    top edge; cells side by side share a vertical segment on the right cell's
    left edge.

    Raises:
        AdjacencyError: the two cells are not orthogonal neighbours.
    """
    x1, y1, x2, y2 = wall
    if wall.is_vertical_pair:
        y = max(y1, y2)
        return Wall(x1, y, x1 + 1, y)
    if wall.is_horizontal_pair:
        x = max(x1, x2)
        return Wall(x, y1, x, y1 + 1)
    raise AdjacencyError("bad input, non-adjacent cells", lineno=lineno, line=wall.format(), code="adjacency")


__all__ = ["KEYWORD", "Wall", "parse_wall", "read_walls", "tile_to_line"]
