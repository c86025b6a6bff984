"""Process-wide state shared by every error log call."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

from .configuration import LogConfiguration, RunMode
from .registry import FileRegistry

__all__ = ["LoggerState"]


@dataclass(eq=False)
class LoggerState:
    """Configuration, loaded files and lock domains of the error log.

    One instance is created by the host service at start-up and handed to
    every call site. ``screen_lock`` and ``file_lock`` guard the console and
    the log file respectively and are never held together.
    """

    configuration: LogConfiguration
    files: FileRegistry = field(default_factory=FileRegistry)
    screen_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    file_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _banner_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _banner_pending: bool = field(default=True, repr=False)
    # Guarded by file_lock.
    rotation_notice_pending: bool = field(default=False, repr=False)

    @property
    def configured_level(self) -> int:
        return self.configuration.verbosity_level

    @property
    def max_file_size(self) -> int:
        return self.configuration.max_log_file_size

    @property
    def log_file_path(self) -> Path | None:
        return self.configuration.log_file_path

    @property
    def is_console_mode(self) -> bool:
        return self.configuration.run_mode is RunMode.INTERACTIVE

    @property
    def startup_banner_pending(self) -> bool:
        with self._banner_lock:
            return self._banner_pending

    def claim_startup_banner(self) -> bool:
        """Clear the pending banner flag, returning whether this call cleared it."""

        with self._banner_lock:
            pending = self._banner_pending
            self._banner_pending = False
            return pending

    def release_startup_banner(self) -> None:
        """Hand a claimed banner back after the sink failed to write it."""

        with self._banner_lock:
            self._banner_pending = True
