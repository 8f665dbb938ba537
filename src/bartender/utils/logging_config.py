"""Logging setup for bartender entry points.

Library modules only create loggers; handlers are installed here, once,
by whichever entry point runs.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("bartender").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
