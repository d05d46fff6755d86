"""Logging for the ``qfx2qif`` package.

Library modules call ``get_logger("qfx2qif.<module>")`` and never attach
handlers. The CLI calls ``configure_logging`` once at startup, which puts a
single stderr handler on the ``qfx2qif`` logger. Until then the package logger
carries a ``NullHandler`` and stays silent.
"""

from __future__ import annotations

import logging
import os
import sys

_PKG_LOGGER_NAME = "qfx2qif"
_LEVEL_ENV = "QFX2QIF_LOG_LEVEL"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def resolve_level(level: str | None) -> int:
    """Map a level name (``"DEBUG"``) or number (``"10"``) to a logging level.

    ``None`` falls back to ``QFX2QIF_LOG_LEVEL``, then ``INFO``. Unknown names
    also give ``INFO``.
    """

    if level is None:
        level = os.getenv(_LEVEL_ENV)
    if not level:
        return logging.INFO
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    """Attach the stderr handler to the package logger, once per process."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
