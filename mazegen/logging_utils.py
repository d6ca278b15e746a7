"""Structured stderr logging for the maze tools.

Each event is one line of ``key=value`` fields (or a compact JSON object
when ``MAZEGEN_LOG_JSON`` is on) prefixed with its level and a unix
timestamp::

    level=info ts=1700000000 event=maze_emit walls=71 thinned=0 logger=maze

stdout belongs to the wall stream, so nothing here ever writes to it; the
generator can be piped into the converter or visualizer with logging on.

Usage:
    from mazegen.logging_utils import get_logger
    log = get_logger("maze")
    log.info(event="maze_generate", width=20, height=10)

The threshold comes from ``MAZEGEN_LOG_LEVEL`` (default ``warn``). The CLI
calls ``configure()`` after loading ``.env`` and ``set_level()`` for
``-v`` / ``--debug``. Fields whose value is None are dropped; spaces in
text values become underscores. Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
DEFAULT_LEVEL = "warn"
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _env_level() -> int:
    # unknown names fall back to the default rather than failing at import
    return LEVELS.get(os.getenv("MAZEGEN_LOG_LEVEL", DEFAULT_LEVEL), LEVELS[DEFAULT_LEVEL])


def _env_json() -> bool:
    return os.getenv("MAZEGEN_LOG_JSON", "0") in _TRUTHY


CURRENT_LEVEL = _env_level()
JSON_MODE = _env_json()


def set_level(name: str) -> None:
    """Change the global threshold at runtime (``-v`` / ``--debug``)."""
    global CURRENT_LEVEL
    if name not in LEVELS:
        raise ValueError(f"unknown log level {name!r}")
    CURRENT_LEVEL = LEVELS[name]


def configure() -> None:
    """Re-read MAZEGEN_LOG_* after a .env file has been loaded."""
    global CURRENT_LEVEL, JSON_MODE
    CURRENT_LEVEL = _env_level()
    JSON_MODE = _env_json()


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    head = f"level={level} ts={int(time.time())}"
    body = " ".join(f"{k}={_text(v)}" for k, v in fields.items() if v is not None)
    return f"{head} {body}" if body else head


def _text(value) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "mazegen"

    def _log(self, lvl: str, **fields):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("mazegen")
