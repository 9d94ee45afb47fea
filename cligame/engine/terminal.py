"""Raw-mode console handling and the non-blocking key poller."""
from __future__ import annotations

import io
import logging
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from typing import IO, Iterator

from cligame.engine.constants import INPUT_TIMEOUT

logger = logging.getLogger(__name__)

CTRL_C = "\x03"


def _terminal_fd(stream: IO) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def raw_mode(stream: IO | None = None) -> Iterator[None]:
    """Switch the terminal to raw mode and always restore it on exit.

    Does nothing when the stream is not a terminal (pipes, files, tests).
    """

    fd = _terminal_fd(stream or sys.stdin)
    if fd is None:
        yield
        return

    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        logger.debug("terminal switched to raw mode")
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("terminal restored")


class InputPoller:
    """Reads at most one character per call without blocking longer than ``timeout``."""

    def __init__(self, stream: IO | None = None, timeout: float = INPUT_TIMEOUT) -> None:
        self.stream = stream or sys.stdin
        self.timeout = timeout

    def poll(self) -> str | None:
        try:
            ready, _, _ = select.select([self.stream], [], [], self.timeout)
        except InterruptedError:
            return None
        if not ready:
            return None

        try:
            data = os.read(self.stream.fileno(), 1)
        except (BlockingIOError, InterruptedError):
            return None

        if not data:
            raise EOFError("input closed")

        char = data.decode("ascii", errors="ignore")
        if char == CTRL_C:
            # Raw mode disables SIGINT, so Ctrl+C arrives as a plain byte.
            raise KeyboardInterrupt
        return char
