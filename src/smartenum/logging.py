"""
Logging for smartenum.

smartenum is a library, so it stays silent by default: the package logger
only carries a ``NullHandler`` until an application opts in with
``setup_logging``. Discovery scans and decode failures are logged at DEBUG,
duplicate members at ERROR. Records name members by id and name only.

Example:
    from smartenum.logging import setup_logging

    setup_logging(level="DEBUG")  # or SMARTENUM_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from smartenum.config import get_settings

LOGGER_NAME = "smartenum"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str | None = None,
    format_string: str | None = None,
    date_format: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Send smartenum records to ``stream`` (stdout by default).

    Replaces whatever handlers the package logger had, including the
    default ``NullHandler``, and stops propagation to the root logger so
    records are not printed twice when the application also logs.

    Args:
        level: Level name. Defaults to ``Settings.log_level``.
        format_string: Format for records. Defaults to ``DEFAULT_FORMAT``.
        date_format: Format for ``asctime``. Defaults to ``DEFAULT_DATE_FORMAT``.
        stream: Output stream.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    resolved = (level or get_settings().log_level).upper()
    log_level = logging.getLevelName(resolved)
    if not isinstance(log_level, int):
        log_level = logging.WARNING
    logger.setLevel(log_level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``.

    Module names inside the package (``smartenum.registry``) are used as-is.
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
