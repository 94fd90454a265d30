"""SessionDeck logging configuration.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides where the ``sessiondeck`` logger tree writes and at which level. The
level comes from ``SESSIONDECK_LOG_LEVEL`` (default ``INFO``).

A modal host owns the terminal, so logs go to a file (or any handler the
caller passes), never to stdout.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sessiondeck.constants import APP_NAME, LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Configure SessionDeck logging.

    Args:
        level: Optional override for `SESSIONDECK_LOG_LEVEL`.
        log_file: File to write to; defaults to a NullHandler-only setup.

    Returns:
        The configured package logger.
    """
    if level:
        os.environ[LOG_LEVEL_ENV] = level

    resolved = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(getattr(logging, resolved, logging.INFO))
    logger.handlers.clear()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
