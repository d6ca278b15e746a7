import json

import pytest

from mazegen import logging_utils
from mazegen.maze import Maze, MazeConfig


def test_default_level_is_quiet(capsys):
    log = logging_utils.get_logger("t")
    log.info(event="hidden")
    log.warn(event="shown", n=3)
    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("level=warn ts=")
    assert "event=shown" in lines[0] and "n=3" in lines[0] and "logger=t" in lines[0]


def test_values_with_spaces_and_none_fields(capsys):
    logging_utils.set_level("debug")
    logging_utils.get_logger("t").debug(event="x", message="two words", skipped=None)
    err = capsys.readouterr().err
    assert "message=two_words" in err
    assert "skipped" not in err


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("MAZEGEN_LOG_JSON", "1")
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "info")
    logging_utils.configure()
    logging_utils.get_logger("t").info(event="maze_emit", walls=12)
    rec = json.loads(capsys.readouterr().err.strip())
    assert rec["event"] == "maze_emit"
    assert rec["walls"] == 12
    assert rec["level"] == "info"
    assert rec["logger"] == "t"


def test_unknown_level_from_env_falls_back(monkeypatch):
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "loud")
    logging_utils.configure()
    assert logging_utils.CURRENT_LEVEL == logging_utils.LEVELS[logging_utils.DEFAULT_LEVEL]


def test_set_level_rejects_unknown_name():
    with pytest.raises(ValueError):
        logging_utils.set_level("trace")


def test_generation_debug_events(capsys):
    logging_utils.set_level("debug")
    Maze(MazeConfig(width=6, height=6, remove_percentage=10, seed=4))
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "event=carve_complete" in captured.err
    assert "event=wall_sampling" in captured.err


def test_get_logger_caches_instances():
    assert logging_utils.get_logger("same") is logging_utils.get_logger("same")


def test_text_line_keeps_field_order(capsys):
    logging_utils.get_logger("order").error(event="maze_emit", walls=4, thinned=0)
    line = capsys.readouterr().err.strip()
    _, _, *fields = line.split(" ")
    assert fields == ["event=maze_emit", "walls=4", "thinned=0", "logger=order"]
