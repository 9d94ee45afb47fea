"""Static tile grid with the passability predicate."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from cligame.data.tiles import MAP_ROWS, TILES, normalise_rows


@dataclass(frozen=True)
class GridMap:
    rows: tuple[str, ...]
    tiles: Mapping[str, Mapping[str, object]]

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        tiles: Mapping[str, Mapping[str, object]] | None = None,
    ) -> "GridMap":
        tileset = TILES if tiles is None else tiles
        return cls(rows=normalise_rows(rows, tileset), tiles=tileset)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def passable(self, x: int, y: int) -> bool:
        """Out-of-bounds cells are simply not passable."""

        if not self.in_bounds(x, y):
            return False
        return bool(self.tiles[self.tile_at(x, y)]["walkable"])


def default_grid() -> GridMap:
    return GridMap(rows=MAP_ROWS, tiles=TILES)
