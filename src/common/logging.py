"""Logging configuration for the comment service.

All client modules log under the "livefyre" logger (or its children),
which gets a single stdout handler here.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

DEFAULT_LOGGER = "livefyre"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """Turn a level name or number into a logging level.

    Falls back to LOG_LEVEL from the environment, then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: int | str | None = None,
    module_name: str = DEFAULT_LOGGER,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Calling it again for the same logger only adjusts the level, so
    modules can call it at import time and the CLI can raise verbosity
    later without stacking handlers.

    Args:
        level: Logging level or level name (default: LOG_LEVEL env, INFO).
        module_name: Name for the logger instance.
        stream: Handler stream (default stdout).

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)
    resolved = resolve_level(level)
    logger.setLevel(resolved)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(resolved)
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger
