"""Logging configuration for the game server and headless walks."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from geocoin.config import LOG_LEVELS
from geocoin.errors import ConfigError

# uvicorn logs every poll of /state at INFO
_NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route all records to *stream* (stdout by default) at *level*."""
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    numeric_level = getattr(logging, name)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(numeric_level if numeric_level <= logging.DEBUG else logging.WARNING)
