"""Size guard for the error log file."""

from __future__ import annotations

from pathlib import Path

from ..core.logging import get_logger
from .platform import PlatformIO

__all__ = ["LogRotationError", "LogRotationGuard", "LogWriteError"]

logger = get_logger()


class LogWriteError(RuntimeError):
    """Raised when the error log file cannot be written."""


class LogRotationError(LogWriteError):
    """Raised when an oversized error log file cannot be inspected or removed."""


class LogRotationGuard:
    """Delete the log file once it reaches ``max_size`` bytes.

    Callers must hold the file lock; the check and the delete are only atomic
    with respect to other callers in this process.
    """

    def __init__(self, platform: PlatformIO, max_size: int) -> None:
        self.platform = platform
        self.max_size = max_size

    def check(self, path: Path) -> bool:
        """Return ``True`` if the file was deleted to make room."""

        try:
            size = self.platform.file_size(path)
        except OSError as exc:
            raise LogRotationError(f"Cannot read size of log file {path}: {exc}") from exc
        if size is None or size <= 0 or size < self.max_size:
            return False

        try:
            self.platform.remove(path)
        except OSError as exc:
            raise LogRotationError(f"Cannot delete oversized log file {path}: {exc}") from exc
        logger.debug("Deleted log file {} at {} bytes (limit {})", path, size, self.max_size)
        return True
