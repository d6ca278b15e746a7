"""Error types shared by the generator and the line protocol tools.

Every failure is terminal: callers are expected to stop processing and report
``str(exc)``. The CLI maps any ``MazeError`` to exit status 1.
"""
from __future__ import annotations

from typing import Optional


class MazeError(Exception):
    code = "maze"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ConfigError(MazeError):
    """Invalid generation parameters, detected before the grid is touched."""

    code = "config"


class _LineError(MazeError):
    def __init__(self, message: str, *, lineno: Optional[int] = None, line: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code)
        self.lineno = lineno
        self.line = line

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class ParseError(_LineError):
    """Malformed wall record (token count, keyword, coordinates)."""

    code = "parse"


class AdjacencyError(_LineError):
    """Wall record whose endpoints are not grid-adjacent."""

    code = "adjacency"


__all__ = ["MazeError", "ConfigError", "ParseError", "AdjacencyError"]
