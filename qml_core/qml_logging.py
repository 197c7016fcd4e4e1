"""Logging setup shared by qml_core and qml_transactions.

The dashboard calls configure_logging() once at startup; modules only ask
for loggers through get_logger(__name__).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAMES = ("qml_core", "qml_transactions")
_ENV_LEVEL = "QML_LOG_LEVEL"
_DEFAULT_FMT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _level_from_name(name: str) -> int | None:
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        numeric = _level_from_name(level)
        if numeric is not None:
            return numeric
    # unset or unrecognized level
    env_val = os.getenv(_ENV_LEVEL)
    if env_val:
        numeric = _level_from_name(env_val)
        if numeric is not None:
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """
    Install one StreamHandler on both package loggers; later calls are no-ops.

    `level` falls back to QML_LOG_LEVEL, then INFO.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FMT))

    for name in _PKG_LOGGER_NAMES:
        logger = logging.getLogger(name)
        for h in list(logger.handlers):
            if isinstance(h, logging.NullHandler):
                logger.removeHandler(h)
        logger.setLevel(numeric_level)
        logger.addHandler(handler)
        logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until ``configure_logging`` runs."""

    if not _CONFIGURED:
        for pkg_name in _PKG_LOGGER_NAMES:
            pkg_logger = logging.getLogger(pkg_name)
            if not pkg_logger.handlers:
                pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
