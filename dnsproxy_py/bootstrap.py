"""Bootstrap helpers for the error log subsystem."""

from __future__ import annotations

from pathlib import Path

from .core.configuration import LogConfiguration
from .core.logging import configure_logging
from .core.registry import FileRegistry
from .core.state import LoggerState
from .printlog.api import ErrorLog

__all__ = ["bootstrap"]


def bootstrap(
    configuration: LogConfiguration | None = None,
    *,
    files: FileRegistry | None = None,
    diagnostics_level: str = "WARNING",
    diagnostics_dir: Path | None = None,
) -> ErrorLog:
    configure_logging(level=diagnostics_level, log_dir=diagnostics_dir)
    state = LoggerState(
        configuration=configuration or LogConfiguration(),
        files=files if files is not None else FileRegistry(),
    )

    path = state.log_file_path
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
    return ErrorLog(state)
