import logging
import re

from cligame.engine.debug import configure_debug_log, debug_enabled
from cligame.engine.player import Player


def test_toggle():
    assert debug_enabled({"DEBUG_GAME": "1"})
    assert not debug_enabled({"DEBUG_GAME": "0"})
    assert not debug_enabled({})


def test_disabled_log_writes_nothing(tmp_path, open_world):
    path = tmp_path / "debug.log"
    logger = configure_debug_log({"CLIGAME_DEBUG_LOG": str(path)})
    Player(1, 1).move(1, 0, open_world)
    assert not logger.isEnabledFor(logging.DEBUG)
    assert not path.exists()


def test_enabled_log_appends_timestamped_lines(tmp_path, open_world):
    path = tmp_path / "debug.log"
    path.write_text("earlier line\n", encoding="utf-8")
    logger = configure_debug_log({"DEBUG_GAME": "1", "CLIGAME_DEBUG_LOG": str(path)})

    Player(1, 1).move(1, 0, open_world)
    for handler in logger.handlers:
        handler.flush()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "earlier line"
    assert re.match(r"^\d+\.\d+: try_move from=\(1,1\) delta=\(1,0\) target=\(2,1\) passable=True$", lines[1])


def test_reconfigure_replaces_handlers(tmp_path):
    env = {"DEBUG_GAME": "1", "CLIGAME_DEBUG_LOG": str(tmp_path / "a.log")}
    configure_debug_log(env)
    logger = configure_debug_log(env)
    assert len(logger.handlers) == 1
    assert logger.propagate is False
