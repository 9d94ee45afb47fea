"""Entry point for launching the game with ``python -m cligame``."""
from __future__ import annotations

import sys

from cligame.main import main


if __name__ == "__main__":
    sys.exit(main())
