"""Logging setup for the argsmith command line."""

from __future__ import annotations

import logging
import os

DEBUG_ENV = "ARGSMITH_DEBUG"
LOG_FORMAT = "%(name)s: %(message)s"

log = logging.getLogger(__name__)

_handler: logging.Handler | None = None


def debug_requested() -> bool:
    """Check the ARGSMITH_DEBUG env var ("1" or "true" enables debug output)."""
    return os.environ.get(DEBUG_ENV, "").lower() in ("1", "true")


def setup_logging(level: int = logging.WARNING) -> None:
    """Attach a stderr handler to the ``argsmith`` logger.

    This is idempotent - later calls only adjust the level.
    """
    global _handler

    package_logger = logging.getLogger("argsmith")
    package_logger.setLevel(level)

    if _handler is not None:
        _handler.setLevel(level)
        return

    _handler = logging.StreamHandler()
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_handler)

    log.debug("Logging initialized at level %s", logging.getLevelName(level))
