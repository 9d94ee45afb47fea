"""Text renderer that redraws the whole frame on a raw-mode terminal."""
from __future__ import annotations

import sys
from typing import TextIO

from cligame.engine.ui import new_map_console, render_frame

CLEAR_SCREEN = "\x1b[H\x1b[2J"
# В raw-режиме терминал не превращает \n в \r\n.
LINE_END = "\r\n"
PROMPT = "move with (w/a/s/d, q to quit): "


class TerminalRenderer:
    """Owns the output stream and the off-screen console the frame is built in.

    ``frames_drawn`` counts full redraws; it is a diagnostic counter only,
    nothing in the game loop reads it.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self._console = None
        self.frames_drawn = 0

    def draw(self, world, player) -> None:
        if self._console is None:
            self._console = new_map_console(world)
        self.stream.write(CLEAR_SCREEN)
        for line in render_frame(world, player, self._console):
            self.print_line(line)
        self.frames_drawn += 1

    def print_line(self, message: str = "") -> None:
        self.stream.write(message)
        self.stream.write(LINE_END)

    def prompt(self) -> None:
        self.stream.write(PROMPT)
        self.stream.flush()

    def flush(self) -> None:
        self.stream.flush()
