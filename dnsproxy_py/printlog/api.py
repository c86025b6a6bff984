"""Entry points used by the rest of the service to report errors."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from ..core.registry import FileKind
from ..core.state import LoggerState
from .categories import LogCategory, LogLevel, ReadTextKind, server_role_label
from .filter import FilterVerdict, LevelFilter
from .formatter import MessageFormatter
from .platform import PlatformIO, select_platform
from .sinks import DualSinkWriter

__all__ = ["ErrorLog", "LINE_TOO_SHORT", "server_role_label"]

LINE_TOO_SHORT = "Data of a line is too short"

_READ_TEXT_TARGETS: dict[ReadTextKind, tuple[LogCategory, FileKind]] = {
    ReadTextKind.HOSTS: (LogCategory.HOSTS, FileKind.HOSTS),
    ReadTextKind.FILTER: (LogCategory.FILTER, FileKind.FILTER),
    ReadTextKind.PARAMETER: (LogCategory.PARAMETER, FileKind.CONFIG),
    ReadTextKind.PARAMETER_MONITOR: (LogCategory.PARAMETER, FileKind.CONFIG),
}


class ErrorLog:
    """Filter, format and write error log entries for one :class:`LoggerState`."""

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
        self.level_filter = LevelFilter(state.configured_level, self.platform)
        self.formatter = MessageFormatter(self.platform)
        self.writer = DualSinkWriter(state, platform=self.platform, console=console, clock=clock)

    def log_error(
        self,
        level: int,
        category: object,
        message: str,
        error_code: int = 0,
        source_file: str | None = None,
        source_line: int = 0,
    ) -> bool:
        """Report ``message`` and return whether it was handled.

        Returns ``False`` when the entry is filtered out, malformed or could
        not be written. Muted network errors return ``True``.
        """

        verdict = self.level_filter.check(level, category, message, error_code)
        if verdict is not FilterVerdict.PROCEED:
            return verdict.succeeded

        formatted = self.formatter.format(
            category,
            message,
            error_code=error_code,
            source_file=source_file,
            source_line=source_line,
        )
        if formatted is None:
            return False
        return self.writer.write(formatted)

    def log_from_read_error(self, kind: ReadTextKind, file_index: int, line: int) -> None:
        """Report a line too short to parse in one of the loaded text files.

        Raises :class:`~dnsproxy_py.core.registry.RegistryError` when
        ``file_index`` does not name a loaded file.
        """

        if kind not in _READ_TEXT_TARGETS:
            return
        category, file_kind = _READ_TEXT_TARGETS[kind]
        file_name = self.state.files.display_name(file_kind, file_index)
        self.log_error(LogLevel.LEVEL_2, category, LINE_TOO_SHORT, 0, file_name, line)
