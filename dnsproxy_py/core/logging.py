"""Internal diagnostics for the error log subsystem.

Faults inside the subsystem itself (a log file that cannot be opened, a
rotation that cannot delete the old file) are reported here, never through
the service log sinks they concern.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

__all__ = ["DIAGNOSTICS_FILE_NAME", "configure_logging", "get_logger"]

DIAGNOSTICS_FILE_NAME = "dnsproxy-diagnostics.log"

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{line} | {message}"


def configure_logging(*, level: str = "WARNING", log_dir: Path | None = None) -> Path | None:
    """Route subsystem diagnostics to stderr and, optionally, a rotating file.

    Returns the diagnostics file path when ``log_dir`` is given.
    """

    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)

    if log_dir is None:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    target = log_dir / DIAGNOSTICS_FILE_NAME
    logger.add(
        target,
        level=level,
        format=_FORMAT,
        rotation="10 MB",
        retention="10 days",
        enqueue=True,
        encoding="utf-8",
    )
    return target


def get_logger():
    """Return the shared loguru logger instance."""

    return logger
