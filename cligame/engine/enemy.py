# engine/enemy.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cligame.engine.constants import ENEMY_DAMAGE, ENEMY_MOVE_DELAY

if TYPE_CHECKING:  # pragma: no cover - runtime import cycle guard
    from cligame.engine.player import Player
    from cligame.engine.world import World

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


@dataclass
class Enemy:
    x: int
    y: int
    facing: str = RIGHT
    steps: int = 0
    movement_delay: int = 0

    def __post_init__(self):
        if self.facing not in (LEFT, RIGHT):
            raise ValueError(f"Unknown facing {self.facing!r}.")

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def reverse(self) -> None:
        self.facing = LEFT if self.facing == RIGHT else RIGHT

    def is_blocked(self, world: "World", x: int, y: int) -> bool:
        return (
            not world.passable(x, y)
            or world.hazard_at((x, y))
            or world.collectible_at((x, y))
        )

    def update(self, world: "World", player: "Player") -> bool:
        """Advance one tick. Returns True if the enemy hit the player."""

        self.movement_delay += 1
        if self.movement_delay < ENEMY_MOVE_DELAY:
            return False

        self.movement_delay = 0
        next_x = self.x - 1 if self.facing == LEFT else self.x + 1
        if self.is_blocked(world, next_x, self.y):
            self.reverse()
        else:
            self.x = next_x
            self.steps += 1

        if (self.x, self.y) != player.position:
            return False

        player.take_damage(ENEMY_DAMAGE)
        logger.debug("enemy at (%d,%d) hit player, health=%d", self.x, self.y, player.health)
        return True
