"""Logging setup for the theater statement package."""

import logging
import sys
from pathlib import Path
from typing import Optional

from theater.utils.config import log_file, log_level

LOGGER_NAME = "theater"


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name.
        level: Logging level.
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        Configured logger. Calling again for a logger that already has
        handlers returns it unchanged.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the package logger. Use after setup_logger has been called."""
    return logging.getLogger(name)


def setup_from_config() -> logging.Logger:
    """Configure the package logger from THEATER_LOG_LEVEL / THEATER_LOG_FILE."""
    return setup_logger(LOGGER_NAME, level=log_level(), log_file=log_file())
