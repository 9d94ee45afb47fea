# engine/ui.py
from __future__ import annotations

import tcod.console

from cligame.engine.constants import BOMB_GLYPH, COOKIE_GLYPH, ENEMY_GLYPH, PLAYER_GLYPH


def new_map_console(world) -> tcod.console.Console:
    return tcod.console.Console(world.width, world.height, order="F")


def draw_map(console: tcod.console.Console, world, player) -> None:
    """Layer the frame: tiles, enemies, bombs, cookies and the player on top."""

    console.clear()
    for y, row in enumerate(world.grid.rows):
        for x, char in enumerate(row):
            console.print(x, y, char)

    for enemy in world.enemies:
        console.print(enemy.x, enemy.y, ENEMY_GLYPH)

    for bomb in world.hazards:
        console.print(bomb.x, bomb.y, BOMB_GLYPH)

    for cookie in world.collectibles:
        console.print(cookie.x, cookie.y, COOKIE_GLYPH)

    px, py = player.position
    if 0 <= px < console.width and 0 <= py < console.height:
        console.print(px, py, PLAYER_GLYPH)


def console_lines(console: tcod.console.Console) -> list[str]:
    # order="F": ch индексируется как [x, y].
    return [
        "".join(chr(code) for code in console.ch[:, y]) for y in range(console.height)
    ]


def status_line(player) -> str:
    return f"Health : {player.health} left"


def render_frame(world, player, console: tcod.console.Console | None = None) -> list[str]:
    """Flatten world and player into map lines followed by the status line."""

    console = console or new_map_console(world)
    draw_map(console, world, player)
    return [*console_lines(console), status_line(player)]
