from __future__ import annotations

import io

import pytest

from cligame.engine.debug import configure_debug_log
from cligame.engine.game import Game
from cligame.engine.graphics_terminal import TerminalRenderer
from cligame.engine.grid import GridMap
from cligame.engine.world import World

# 16×10: сплошной пол внутри стен.
OPEN_ROWS = [
    "################",
    *["#" + "." * 14 + "#" for _ in range(8)],
    "################",
]


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedPoller:
    """Hands out scripted keys; None means "nothing typed", exhaustion means EOF."""

    def __init__(self, keys=()) -> None:
        self.keys = list(keys)
        self.stream = io.StringIO()
        self.polls = 0

    def poll(self):
        self.polls += 1
        if not self.keys:
            raise EOFError
        key = self.keys.pop(0)
        if isinstance(key, type) and issubclass(key, BaseException):
            raise key
        return key


@pytest.fixture
def open_grid() -> GridMap:
    return GridMap.from_rows(OPEN_ROWS)


@pytest.fixture
def open_world(open_grid) -> World:
    return World(grid=open_grid)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_game(clock, output):
    def factory(world, player, keys=()):
        return Game(
            world,
            player,
            TerminalRenderer(output),
            ScriptedPoller(keys),
            clock=clock,
            frame_duration=1.0,
        )

    return factory


@pytest.fixture(autouse=True)
def _quiet_debug_log(monkeypatch):
    monkeypatch.delenv("DEBUG_GAME", raising=False)
    monkeypatch.delenv("CLIGAME_DEBUG_LOG", raising=False)
    yield
    configure_debug_log({})
