import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegen import logging_utils  # noqa: E402

ENV_VARS = ("MAZE_WIDTH", "MAZE_HEIGHT", "MAZE_SEED", "MAZEGEN_LOG_LEVEL", "MAZEGEN_LOG_JSON")


@pytest.fixture(autouse=True)
def _isolate_env():
    """Start every test from a clean environment; .env loading in run.main writes os.environ."""
    saved = dict(os.environ)
    for name in ENV_VARS:
        os.environ.pop(name, None)
    logging_utils.configure()
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(saved)
        logging_utils.configure()
