from pathlib import Path

import pytest

from cligame.data.loader import load_game_data
from cligame.data.spawns import BOMB_SPAWNS, COOKIE_SPAWNS, ENEMY_SPAWNS, PLAYER_SPAWN
from cligame.data.tiles import MAP_ROWS, TILES, normalise_rows


def test_packaged_data_loads():
    data = load_game_data()
    assert len(data["map"]) == 15


def test_packaged_data_is_parsed_once():
    assert load_game_data() is load_game_data()


def test_missing_data_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game_data(Path(tmp_path) / "nope.json")


def test_tiles_walkability():
    assert TILES["#"]["walkable"] is False
    assert TILES["."]["walkable"] is True
    assert TILES["+"]["walkable"] is True


def test_map_rows_are_rectangular():
    assert len(MAP_ROWS) == 15
    assert {len(row) for row in MAP_ROWS} == {25}


def test_normalise_rows_truncates_long_rows():
    assert normalise_rows(["###", "#..#"], TILES) == ("###", "#..")


def test_normalise_rows_rejects_unknown_tiles():
    with pytest.raises(ValueError):
        normalise_rows(["#?#"], TILES)


def test_normalise_rows_rejects_empty_map():
    with pytest.raises(ValueError):
        normalise_rows([], TILES)


def test_spawn_points():
    assert PLAYER_SPAWN == {"x": 3, "y": 3, "health": 100}
    assert len(COOKIE_SPAWNS) == 6
    assert len(BOMB_SPAWNS) == 6
    assert (2, 8) in BOMB_SPAWNS
    assert ENEMY_SPAWNS[0] == {"x": 10, "y": 8, "facing": "right"}
    assert len(ENEMY_SPAWNS) == 5
