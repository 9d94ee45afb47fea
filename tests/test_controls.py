import pytest

from cligame.engine.controls import QUIT, interpret_key


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("w", (0, -1)),
        ("s", (0, 1)),
        ("a", (-1, 0)),
        ("d", (1, 0)),
        ("D", (1, 0)),
        (" w\n", (0, -1)),
        ("q", QUIT),
        ("Q", QUIT),
    ],
)
def test_recognised_keys(raw, expected):
    assert interpret_key(raw) == expected


@pytest.mark.parametrize("raw", [None, "", " ", "\r", "x", "1", "\x1b"])
def test_everything_else_is_ignored(raw):
    assert interpret_key(raw) is None
