from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..config import settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def get_logger(name: str) -> logging.Logger:
    """Return a file-backed logger; repeated calls reuse the configured handler."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_path: Path = settings.log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    handler = RotatingFileHandler(log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    # stdout carries the MCP stdio transport; keep log records off it
    logger.propagate = False
    return logger
