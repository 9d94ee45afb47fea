"""The real-time game loop: fixed enemy ticks, polled input, dirty redraws."""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum

from cligame.engine.constants import BOMB_DAMAGE, ENEMY_DAMAGE, FRAME_DURATION
from cligame.engine.controls import QUIT, interpret_key
from cligame.engine.graphics_terminal import TerminalRenderer
from cligame.engine.player import Player
from cligame.engine.terminal import InputPoller, raw_mode
from cligame.engine.world import World, build_world, spawn_player

logger = logging.getLogger(__name__)

WIN_MESSAGE = "yay! you ate all the cookies"
GAME_OVER_MESSAGE = "Game Over, you ran out of health."
FAREWELL_MESSAGE = "Ciao!"


class GameState(Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


def _enemy_hit_message(player: Player) -> str:
    return f"Ouch! Enemy hit you, Health: {player.health}"


def _bomb_message(player: Player) -> str:
    return f"BOOM! You have {player.health} health left."


class Game:
    def __init__(
        self,
        world: World,
        player: Player,
        renderer: TerminalRenderer,
        poller: InputPoller,
        *,
        clock: Callable[[], float] = time.perf_counter,
        frame_duration: float = FRAME_DURATION,
    ) -> None:
        self.world = world
        self.player = player
        self.renderer = renderer
        self.poller = poller
        self.clock = clock
        self.frame_duration = frame_duration
        self.state = GameState.RUNNING
        self.needs_draw = True
        self._last_tick = clock()

    @classmethod
    def create(cls, stdin=None, stdout=None) -> "Game":
        world = build_world()
        player = spawn_player(world)
        return cls(world, player, TerminalRenderer(stdout), InputPoller(stdin))

    def run(self) -> GameState:
        try:
            with raw_mode(self.poller.stream):
                while self.state is GameState.RUNNING:
                    self.step()
                self.renderer.flush()
        finally:
            self.renderer.print_line(FAREWELL_MESSAGE)
            self.renderer.flush()
        return self.state

    def step(self) -> GameState:
        """Run one outer iteration of the loop."""

        self._update_enemies_if_needed()
        if not self.player.is_dead:
            self._handle_input()
        if self.state is GameState.RUNNING:
            self._draw_if_needed()
        return self.state

    def _update_enemies_if_needed(self) -> None:
        now = self.clock()
        if now - self._last_tick < self.frame_duration:
            return

        self._last_tick = now
        for _ in self.world.advance_enemies(self.player):
            self.renderer.print_line(_enemy_hit_message(self.player))
        self.needs_draw = True

    def _handle_input(self) -> None:
        try:
            raw = self.poller.poll()
        except EOFError:
            logger.debug("end of input")
            self._conclude(GameState.QUIT, redraw=True)
            return

        command = interpret_key(raw)
        if command is None:
            return
        if command == QUIT:
            self._conclude(GameState.QUIT, redraw=True)
            return
        self._move_player(command)

    def _move_player(self, delta: tuple[int, int]) -> None:
        dx, dy = delta
        self.player.move(dx, dy, self.world)
        self.needs_draw = True

        if self._resolve_enemy_collision() or self._resolve_bomb_collision():
            self._conclude(GameState.LOST, GAME_OVER_MESSAGE, redraw=True)

    def _resolve_enemy_collision(self) -> bool:
        if self.world.occupant_at(self.player.position) is None:
            return False

        self.player.take_damage(ENEMY_DAMAGE)
        self.renderer.print_line(_enemy_hit_message(self.player))
        return self.player.is_dead

    def _resolve_bomb_collision(self) -> bool:
        exploded = self.world.trigger_hazard_at(self.player.position)
        self.renderer.print_line()
        if not exploded:
            return False

        self.player.take_damage(BOMB_DAMAGE)
        self.renderer.print_line(_bomb_message(self.player))
        return self.player.is_dead

    def _draw_if_needed(self) -> None:
        if not self.needs_draw:
            return

        self.renderer.draw(self.world, self.player)
        if self.world.is_cleared():
            self._conclude(GameState.WON, WIN_MESSAGE)
            return
        if self.player.is_dead:
            self._conclude(GameState.LOST, GAME_OVER_MESSAGE)
            return

        self.renderer.prompt()
        self.needs_draw = False

    def _conclude(
        self, state: GameState, message: str | None = None, *, redraw: bool = False
    ) -> None:
        logger.debug("state %s -> %s", self.state.value, state.value)
        self.state = state
        if redraw:
            self.renderer.draw(self.world, self.player)
        if message:
            self.renderer.print_line(message)
