"""Logging configuration."""
import logging
import sys
from typing import Optional

from checklist.core.config import settings

LOGGER_NAME = "checklist"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach a stdout handler to the package logger (once).

    The settings level is applied only on that first call; an explicit
    `level` always wins. Levels set later by callers are left alone.
    """
    root = logging.getLogger(LOGGER_NAME)
    if level:
        root.setLevel(level.upper())
    if not root.handlers:
        if not level:
            root.setLevel(settings.log_level.upper())
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Package logger; child loggers share the one handler."""
    setup_logging()
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
