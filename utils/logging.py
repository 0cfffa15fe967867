"""Logging helpers for bssidscan."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Application loggers ('bssidscan.*') and library modules ('utils.*')
ROOT_LOGGERS = ('bssidscan', 'utils')

_handler: logging.Handler | None = None


def configure_logging(level: str | int = 'INFO') -> None:
    """
    Attach a stream handler to the application's root loggers.

    Safe to call more than once; later calls only change the level.
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        for name in ROOT_LOGGERS:
            logging.getLogger(name).addHandler(_handler)

    for name in ROOT_LOGGERS:
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger, e.g. get_logger('bssidscan.routes')."""
    return logging.getLogger(name)
