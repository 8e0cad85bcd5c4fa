"""Logging configuration for the backend.

Every module logs through ``logging.getLogger(__name__)``; all of them live
under the ``backend`` logger, which :func:`configure` wires to stderr and,
optionally, a rotating log file::

    from backend.logging_setup import configure
    configure(level="DEBUG")
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

from backend.config import settings

LOGGER_NAME = "backend"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LevelT = Union[int, str]


def _stream_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(path: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT | None = None,
    log_file: Path | str | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)configure the ``backend`` logger.

    Args:
        level: Numeric or textual level.  Defaults to ``settings.log_level``.
        log_file: Optional log file path.  Defaults to ``settings.log_file``;
            console-only output when both are unset.
        log_format: Format string for :class:`logging.Formatter`.

    Existing handlers are replaced, so calling this twice does not duplicate
    output.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level if level is not None else settings.log_level.upper())

    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    lg.addHandler(_stream_handler(log_format))

    path = log_file if log_file is not None else settings.log_file
    if path is not None:
        lg.addHandler(_file_handler(path, log_format))

    lg.propagate = False
    return lg
