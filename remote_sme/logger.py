# === FILE: remote_sme/logger.py ===
"""Logging setup for remote-source-map-explorer.

All modules share one named logger::

    from remote_sme.logger import logger
    logger.debug("Resolved %s", url)

The CLI calls :func:`init_logging` once with the level and optional log file
chosen on the command line.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "RemoteSME"

_LevelT = Union[int, str]


def _handlers(log_file: str | Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        )
    return handlers


def init_logging(level: _LevelT = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Replace the project logger's handlers: stdout, plus *log_file* when given."""
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    lg.handlers.clear()
    for handler in _handlers(log_file):
        handler.setFormatter(logging.Formatter(_FORMAT))
        lg.addHandler(handler)
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging"]
