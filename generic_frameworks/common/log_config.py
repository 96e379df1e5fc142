"""
================================================================================
Logging Setup
================================================================================

Initializes the loguru logger shared by the API and UI frameworks.

Sinks:
    - console (stderr, colorized)
    - logs/combined.log  (every level at or above the configured one)
    - logs/error.log     (ERROR and above only)

Both files rotate by size and are pruned by age. Every line is formatted as
``<timestamp> [<level>]: <message>``.

Usage:
    from generic_frameworks.common.log_config import init_logger

    init_logger()
    init_logger(level="DEBUG", log_dir="build/logs")

================================================================================
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


LINE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} [{level}]: {message}"
CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> [<level>{level}</level>]: <level>{message}</level>"

COMBINED_LOG_NAME = "combined.log"
ERROR_LOG_NAME = "error.log"

DEFAULT_ROTATION = "10 MB"
DEFAULT_RETENTION = "7 days"

_logger_initialized = False


def init_logger(
    level: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
    console: bool = True,
) -> Path:
    """
    Initialize loguru with the console, combined and error sinks.

    Calling it again is a no-op until ``reset_logger()`` is called.

    Args:
        level: Minimum level for console and combined log. Defaults to the
            ``LOG_LEVEL`` environment variable, then ``INFO``.
        log_dir: Directory for the log files. Defaults to ``LOG_DIR``, then
            ``logs``.
        console: Whether to add the stderr sink.

    Returns:
        The directory the log files are written to.
    """
    global _logger_initialized

    log_dir = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    if _logger_initialized:
        return log_dir

    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger.remove()

    if console:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=True,
        )

    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        str(log_dir / COMBINED_LOG_NAME),
        format=LINE_FORMAT,
        level=level,
        rotation=DEFAULT_ROTATION,
        retention=DEFAULT_RETENTION,
        encoding="utf-8",
    )
    logger.add(
        str(log_dir / ERROR_LOG_NAME),
        format=LINE_FORMAT,
        level="ERROR",
        rotation=DEFAULT_ROTATION,
        retention=DEFAULT_RETENTION,
        encoding="utf-8",
    )

    _logger_initialized = True
    logger.debug(f"Logger initialized (level={level}, dir={log_dir})")
    return log_dir


def reset_logger() -> None:
    """Drop every sink and allow ``init_logger()`` to run again."""
    global _logger_initialized

    logger.remove()
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
    "LINE_FORMAT",
]
