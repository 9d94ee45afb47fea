# main.py
from __future__ import annotations

import sys

from cligame.engine.debug import configure_debug_log
from cligame.engine.game import Game

INTERRUPTED_EXIT_CODE = 130


def main() -> int:
    configure_debug_log()
    game = Game.create()
    try:
        game.run()
    except KeyboardInterrupt:
        return INTERRUPTED_EXIT_CODE
    return 0


if __name__ == "__main__":
    sys.exit(main())
