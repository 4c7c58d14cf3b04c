"""Timestamped debug trail shared by the controllers and the TUI apps."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from animemoi.config import DEBUG_LOG_PATH

_ROOT_LOGGER = "animemoi"


class _IsoFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()


def configure_debug_log(path: str | Path | None = None) -> Path | None:
    """
    Attach a file handler writing `<utc iso timestamp> <logger> <message>` lines.

    Returns the log path, or None when the file could not be opened.
    Logging must never interfere with app flow, so open failures are ignored.
    """
    log_path = Path(path or DEBUG_LOG_PATH)
    logger = logging.getLogger(_ROOT_LOGGER)

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_path):
            return log_path

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(_IsoFormatter("%(asctime)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return log_path
