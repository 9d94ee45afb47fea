"""Mapping from typed characters to game commands."""
from __future__ import annotations

from cligame.engine.constants import MOVES, QUIT_KEY

QUIT = "quit"


def interpret_key(raw: str | None) -> tuple[int, int] | str | None:
    """Return a move delta, ``QUIT`` or None for anything unrecognised."""

    if raw is None:
        return None
    key = raw.strip().lower()
    if not key:
        return None
    if key == QUIT_KEY:
        return QUIT
    return MOVES.get(key)
