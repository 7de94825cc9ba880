"""Application-wide logger writing to platformdirs user_log_dir.

Every module logs through a child of the ``tinytodo_cli`` logger, so one
rotating file collects the store, history and CLI records.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tinytodo_cli"
_LOG_FILE = "tinytodo.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the application log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _file_handler(logger: logging.Logger, path: Path) -> logging.Handler | None:
    """Return the rotating handler already writing to ``path``, if any."""
    target = os.path.abspath(path)
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == target
        ):
            return handler
    return None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Handlers attached by someone else (test capture, embedding apps) are left
    alone; the file handler is added unless one for the same path exists.
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if _file_handler(logger, path) is None:
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Apply a level name (e.g. from config) to the logger and its log file."""
    logger = get_logger()
    level = level.upper()
    logger.setLevel(level)
    handler = _file_handler(logger, log_file_path())
    if handler is not None:
        handler.setLevel(level)
