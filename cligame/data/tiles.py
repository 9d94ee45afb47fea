"""Definitions for map tiles and the static level layout."""
from __future__ import annotations

from typing import Mapping, Sequence

from cligame.data.loader import load_game_data

WALL_CHAR = "#"


def _normalise_tile(name: str, tile: Mapping[str, object]) -> dict[str, object]:
    if len(name) != 1:
        raise ValueError(f"Tile key must be a single character, got {name!r}.")
    return {
        "char": name,
        "name": str(tile.get("name", name)),
        "walkable": bool(tile.get("walkable", False)),
    }


def _normalise_tileset(raw_tiles: Mapping[str, Mapping[str, object]]) -> dict[str, dict]:
    return {str(name): _normalise_tile(str(name), data) for name, data in raw_tiles.items()}


def normalise_rows(
    rows: Sequence[str], tiles: Mapping[str, Mapping[str, object]]
) -> tuple[str, ...]:
    """Make every row exactly as wide as the first one.

    Longer rows are cut, shorter rows are padded with walls.
    """

    if not rows:
        raise ValueError("Map must contain at least one row.")
    width = len(rows[0])
    normalised: list[str] = []
    for y, row in enumerate(rows):
        row = str(row)[:width].ljust(width, WALL_CHAR)
        for x, char in enumerate(row):
            if char not in tiles:
                raise ValueError(f"Unknown map tile {char!r} at ({x}, {y}).")
        normalised.append(row)
    return tuple(normalised)


def _load_tiles(data: Mapping[str, object]) -> dict[str, dict]:
    tiles = _normalise_tileset(data.get("tiles", {}))  # type: ignore[arg-type]
    tiles.setdefault(WALL_CHAR, {"char": WALL_CHAR, "name": "wall", "walkable": False})
    return tiles


_DATA = load_game_data()

TILES = _load_tiles(_DATA)
MAP_ROWS = normalise_rows(_DATA.get("map", []), TILES)
