"""Static pickups: cookies to collect and bombs to avoid."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Collectible:
    """A cookie. Eaten when the player steps on it."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass
class Hazard:
    """A bomb. Goes off once when the player steps on it."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y
