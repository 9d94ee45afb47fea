# engine/player.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cligame.engine.constants import STARTING_HEALTH

if TYPE_CHECKING:  # pragma: no cover - runtime import cycle guard
    from cligame.engine.world import World

logger = logging.getLogger(__name__)


class Player:
    def __init__(self, x: int, y: int, health: int = STARTING_HEALTH):
        self.x = x
        self.y = y
        self.health = health

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> None:
        # Здоровье может уйти в минус, смерть проверяет игровой цикл.
        self.health -= amount

    def move(self, dx: int, dy: int, world: "World") -> bool:
        """Step by (dx, dy) if the target tile is passable and eat any cookie there."""

        target_x = self.x + dx
        target_y = self.y + dy
        passable = world.passable(target_x, target_y)
        logger.debug(
            "try_move from=(%d,%d) delta=(%d,%d) target=(%d,%d) passable=%s",
            self.x,
            self.y,
            dx,
            dy,
            target_x,
            target_y,
            passable,
        )
        if not passable:
            return False

        self.x = target_x
        self.y = target_y
        world.consume_collectible_at(self.position)
        return True
