"""Utility helpers to load the packaged game data."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

_DATA_FILE = Path(__file__).with_name("game_data.json")


def _read(data_file: Path) -> dict[str, Any]:
    if not data_file.exists():
        raise FileNotFoundError(
            f"Game data file not found, expected {data_file}."
        )
    with data_file.open(encoding="utf-8") as fh:
        return json.load(fh)


@lru_cache(maxsize=None)
def _packaged_data() -> dict[str, Any]:
    return _read(_DATA_FILE)


def load_game_data(path: Path | None = None) -> dict[str, Any]:
    """Load the static data file that describes the map and spawn points.

    The packaged file is parsed once and shared; treat the result as read-only.
    """

    if path is None:
        return _packaged_data()
    return _read(path)
