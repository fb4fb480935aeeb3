"""Logging setup for the launchdeck logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Attach a single handler to the ``launchdeck`` logger.

    The TUI owns the terminal, so records go to ``log_file`` when given and
    to stderr otherwise (used by the non-interactive subcommands).
    """
    logger = logging.getLogger("launchdeck")
    if not logger.handlers:
        if log_file is not None:
            handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
