"""World state: the grid, pickups and enemies, and the queries over them."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from cligame.data.spawns import BOMB_SPAWNS, COOKIE_SPAWNS, ENEMY_SPAWNS, PLAYER_SPAWN
from cligame.engine.enemy import Enemy
from cligame.engine.grid import GridMap, default_grid
from cligame.engine.pickups import Collectible, Hazard
from cligame.engine.player import Player

logger = logging.getLogger(__name__)


@dataclass
class World:
    grid: GridMap
    collectibles: list[Collectible] = field(default_factory=list)
    hazards: list[Hazard] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    ticks: int = 0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def passable(self, x: int, y: int) -> bool:
        return self.grid.passable(x, y)

    def occupant_at(self, pos: tuple[int, int]) -> Enemy | None:
        for enemy in self.enemies:
            if enemy.position == pos:
                return enemy
        return None

    def collectible_at(self, pos: tuple[int, int]) -> bool:
        return any(item.position == pos for item in self.collectibles)

    def hazard_at(self, pos: tuple[int, int]) -> bool:
        return any(bomb.position == pos for bomb in self.hazards)

    def consume_collectible_at(self, pos: tuple[int, int]) -> bool:
        before = len(self.collectibles)
        self.collectibles[:] = [item for item in self.collectibles if item.position != pos]
        eaten = len(self.collectibles) < before
        if eaten:
            logger.debug("cookie eaten at %s, %d left", pos, len(self.collectibles))
        return eaten

    def trigger_hazard_at(self, pos: tuple[int, int]) -> bool:
        for index, bomb in enumerate(self.hazards):
            if bomb.position == pos:
                del self.hazards[index]
                logger.debug("bomb triggered at %s", pos)
                return True
        return False

    def is_cleared(self) -> bool:
        return not self.collectibles

    def advance_enemies(self, player: Player) -> list[Enemy]:
        """Run one simulation tick and return the enemies that hit the player."""

        hits = [enemy for enemy in self.enemies if enemy.update(self, player)]
        self.ticks += 1
        return hits


def _check_spawns(grid: GridMap, label: str, points: Iterable[tuple[int, int]]) -> None:
    for x, y in points:
        if not grid.passable(x, y):
            raise ValueError(f"{label} spawn ({x}, {y}) is not on a passable tile.")


def build_world(grid: GridMap | None = None) -> World:
    grid = grid or default_grid()

    _check_spawns(grid, "Cookie", COOKIE_SPAWNS)
    _check_spawns(grid, "Bomb", BOMB_SPAWNS)
    _check_spawns(grid, "Enemy", ((entry["x"], entry["y"]) for entry in ENEMY_SPAWNS))

    return World(
        grid=grid,
        collectibles=[Collectible(x, y) for x, y in COOKIE_SPAWNS],
        hazards=[Hazard(x, y) for x, y in BOMB_SPAWNS],
        enemies=[
            Enemy(entry["x"], entry["y"], facing=entry["facing"]) for entry in ENEMY_SPAWNS
        ],
    )


def spawn_player(world: World) -> Player:
    x, y = PLAYER_SPAWN["x"], PLAYER_SPAWN["y"]
    _check_spawns(world.grid, "Player", [(x, y)])
    return Player(x, y, PLAYER_SPAWN["health"])
