"""Fixed spawn points for the player, pickups and patrolling enemies."""
from __future__ import annotations

from typing import Iterable

from cligame.data.loader import load_game_data


def _point(value: Iterable[object]) -> tuple[int, int]:
    x, y = value
    return int(x), int(y)


def _normalise_enemy(entry: dict) -> dict:
    facing = str(entry.get("facing", "right")).lower()
    if facing not in ("left", "right"):
        raise ValueError(f"Unknown enemy facing {facing!r}.")
    return {"x": int(entry["x"]), "y": int(entry["y"]), "facing": facing}


def _load_spawns() -> dict:
    data = load_game_data()
    player = data.get("player", {})
    return {
        "player": {
            "x": int(player.get("x", 1)),
            "y": int(player.get("y", 1)),
            "health": int(player.get("health", 100)),
        },
        "cookies": [_point(point) for point in data.get("cookies", [])],
        "bombs": [_point(point) for point in data.get("bombs", [])],
        "enemies": [_normalise_enemy(entry) for entry in data.get("enemies", [])],
    }


_SPAWNS = _load_spawns()

PLAYER_SPAWN: dict = _SPAWNS["player"]
COOKIE_SPAWNS: list[tuple[int, int]] = _SPAWNS["cookies"]
BOMB_SPAWNS: list[tuple[int, int]] = _SPAWNS["bombs"]
ENEMY_SPAWNS: list[dict] = _SPAWNS["enemies"]
