"""Optional append-only debug log, switched on by an environment variable."""
from __future__ import annotations

import logging
import os
from typing import Mapping

from cligame.engine.constants import DEBUG_ENV_VAR, DEBUG_LOG_ENV_VAR, DEBUG_LOG_PATH

LOGGER_NAME = "cligame"
LOG_FORMAT = "%(created)f: %(message)s"


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get(DEBUG_ENV_VAR) == "1"


def configure_debug_log(environ: Mapping[str, str] | None = None) -> logging.Logger:
    """Attach a file handler to the package logger when debugging is enabled.

    The logger never propagates to the root logger so nothing leaks onto the
    game screen. With debugging off only a NullHandler is installed.
    """

    environ = os.environ if environ is None else environ
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not debug_enabled(environ):
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        return logger

    path = environ.get(DEBUG_LOG_ENV_VAR) or DEBUG_LOG_PATH
    # delay=True: файл открывается при первой записи, ошибки I/O не роняют игру.
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
