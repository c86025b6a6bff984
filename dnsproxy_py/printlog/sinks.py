"""Console and file output for the error log."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TextIO

from ..core.logging import get_logger
from ..core.state import LoggerState
from .formatter import FormattedMessage
from .platform import PlatformIO, select_platform
from .rotation import LogRotationGuard, LogWriteError

__all__ = ["DualSinkWriter", "ROTATION_NOTICE", "format_timestamp"]

ROTATION_NOTICE = "[Notice] Old log file was deleted.\n"

logger = get_logger()


def format_timestamp(moment: datetime) -> str:
    return moment.strftime("[%Y-%m-%d %H:%M:%S] -> ")


class DualSinkWriter:
    """Write finished lines to the console and the log file.

    Each sink serialises its own writes under its own lock. The startup
    banner goes to whichever sink claims it first, once per process.
    """

    def __init__(
        self,
        state: LoggerState,
        *,
        platform: PlatformIO | None = None,
        console: TextIO | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.state = state
        self.platform = platform or select_platform(state.configuration.platform)
        self.guard = LogRotationGuard(self.platform, state.max_file_size)
        self._console = console
        self._clock = clock

    @property
    def banner(self) -> str:
        return f"[Notice] {self.state.configuration.service_name} started.\n"

    def write(self, message: FormattedMessage) -> bool:
        text = message.render()
        stamp = format_timestamp(self._clock())

        succeeded = True
        if self.state.is_console_mode:
            succeeded = self._write_console(text, stamp) and succeeded
        path = self.state.log_file_path
        if path is not None:
            succeeded = self._write_file(path, text, stamp) and succeeded
        return succeeded

    def _write_console(self, text: str, stamp: str) -> bool:
        with self.state.screen_lock:
            stream = self._console if self._console is not None else sys.stderr
            banner_claimed = self.state.claim_startup_banner()
            try:
                if banner_claimed:
                    stream.write(stamp + self.banner)
                stream.write(stamp + text)
                stream.flush()
            except (OSError, ValueError) as exc:
                if banner_claimed:
                    self.state.release_startup_banner()
                logger.warning("Console log write failed: {}", exc)
                return False
        return True

    def _write_file(self, path: Path, text: str, stamp: str) -> bool:
        with self.state.file_lock:
            try:
                if self.guard.check(path):
                    self.state.rotation_notice_pending = True
                self._append(path, text, stamp)
            except LogWriteError as exc:
                logger.warning("Log file write failed: {}", exc)
                return False
        return True

    def _append(self, path: Path, text: str, stamp: str) -> None:
        try:
            handle = self._open(path)
        except (OSError, LookupError) as exc:
            raise LogWriteError(f"Cannot open log file {path}: {exc}") from exc

        banner_claimed = self.state.claim_startup_banner()
        banner_written = False
        try:
            with handle:
                if banner_claimed:
                    handle.write(stamp + self.banner)
                    banner_written = True
                if self.state.rotation_notice_pending:
                    handle.write(stamp + ROTATION_NOTICE)
                    self.state.rotation_notice_pending = False
                handle.write(stamp + text)
        except OSError as exc:
            if banner_claimed and not banner_written:
                self.state.release_startup_banner()
            raise LogWriteError(f"Cannot write log file {path}: {exc}") from exc

    def _open(self, path: Path) -> TextIO:
        return open(path, "a", encoding=self.state.configuration.encoding, errors="replace")
