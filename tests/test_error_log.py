from __future__ import annotations

import errno
import io
from datetime import datetime
from pathlib import Path

import pytest
from dnsproxy_py.bootstrap import bootstrap
from dnsproxy_py.core.configuration import LogConfiguration, RunMode
from dnsproxy_py.core.logging import DIAGNOSTICS_FILE_NAME, configure_logging, get_logger
from dnsproxy_py.core.registry import FileKind, FileRegistry, RegistryError
from dnsproxy_py.core.state import LoggerState
from dnsproxy_py.printlog.api import ErrorLog
from dnsproxy_py.printlog.categories import LogCategory, LogLevel, ReadTextKind
from dnsproxy_py.printlog.platform import PosixPlatformIO

STAMP = "[2016-03-07 09:05:01] -> "
BANNER = "[Notice] Pcap_DNSProxy started.\n"


def build_log(
    tmp_path: Path,
    *,
    verbosity_level: int = 3,
    files: FileRegistry | None = None,
) -> tuple[ErrorLog, io.StringIO]:
    state = LoggerState(
        configuration=LogConfiguration(
            verbosity_level=verbosity_level,
            log_file_path=tmp_path / "Error.log",
            run_mode=RunMode.INTERACTIVE,
        ),
        files=files if files is not None else FileRegistry(),
    )
    # Consume the banner so assertions only see the entries under test.
    state.claim_startup_banner()
    console = io.StringIO()
    log = ErrorLog(
        state,
        platform=PosixPlatformIO(),
        console=console,
        clock=lambda: datetime(2016, 3, 7, 9, 5, 1),
    )
    return log, console


def file_content(tmp_path: Path) -> str:
    target = tmp_path / "Error.log"
    if not target.exists():
        return ""
    return target.read_text(encoding="utf-8")


def test_notice_written_to_both_sinks(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.NOTICE, "Test")
    assert console.getvalue() == STAMP + "[Notice] Test.\n"
    assert file_content(tmp_path) == STAMP + "[Notice] Test.\n"


def test_error_code_rendered_on_posix(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.SYSTEM, "Open failed", 2)
    assert console.getvalue() == (
        STAMP + "[System Error] Open failed: No such file or directory [2].\n"
    )


@pytest.mark.parametrize("category", list(LogCategory))
@pytest.mark.parametrize("level", [1, 2, 3])
def test_level_off_writes_nothing(tmp_path: Path, category: LogCategory, level: int) -> None:
    log, console = build_log(tmp_path, verbosity_level=0)
    assert log.log_error(level, category, "Test") is False
    assert console.getvalue() == ""
    assert file_content(tmp_path) == ""


def test_more_verbose_level_writes_nothing(tmp_path: Path) -> None:
    log, console = build_log(tmp_path, verbosity_level=1)
    assert log.log_error(LogLevel.LEVEL_2, LogCategory.HOSTS, "Test") is False
    assert console.getvalue() == ""
    assert file_content(tmp_path) == ""


@pytest.mark.parametrize("code", [errno.ENETUNREACH, errno.EHOSTUNREACH])
def test_unreachable_network_error_suppressed_as_success(tmp_path: Path, code: int) -> None:
    log, console = build_log(tmp_path, verbosity_level=2)
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.NETWORK, "Send failed", code) is True
    assert console.getvalue() == ""
    assert file_content(tmp_path) == ""


def test_unreachable_network_error_logged_at_level_three(tmp_path: Path) -> None:
    log, console = build_log(tmp_path, verbosity_level=3)
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.NETWORK, "Send failed", errno.ENETUNREACH)
    assert "[Network Error] Send failed: " in console.getvalue()
    assert f"[{errno.ENETUNREACH}].\n" in file_content(tmp_path)


def test_unknown_category_writes_nothing(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    assert log.log_error(LogLevel.LEVEL_1, 42, "Test") is False
    assert console.getvalue() == ""
    assert not (tmp_path / "Error.log").exists()


def test_empty_message_writes_nothing(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.NOTICE, "") is False
    assert console.getvalue() == ""


def test_location_suffix(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    assert log.log_error(LogLevel.LEVEL_2, LogCategory.PARAMETER, "Bad value", 0, "Config.ini", 8)
    assert console.getvalue() == STAMP + "[Parameter Error] Bad value in Config.ini(Line 8).\n"


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ReadTextKind.HOSTS, "[Hosts Error] Data of a line is too short in Hosts.conf(Line 12).\n"),
        (
            ReadTextKind.FILTER,
            "[Filter Error] Data of a line is too short in IPFilter.conf(Line 12).\n",
        ),
        (
            ReadTextKind.PARAMETER,
            "[Parameter Error] Data of a line is too short in Config.ini(Line 12).\n",
        ),
        (
            ReadTextKind.PARAMETER_MONITOR,
            "[Parameter Error] Data of a line is too short in Config.ini(Line 12).\n",
        ),
    ],
)
def test_read_error_dispatch(tmp_path: Path, kind: ReadTextKind, expected: str) -> None:
    files = FileRegistry()
    files.register(FileKind.HOSTS, "Hosts.conf")
    files.register(FileKind.FILTER, "IPFilter.conf")
    files.register(FileKind.CONFIG, "Config.ini")
    log, console = build_log(tmp_path, files=files)

    log.log_from_read_error(kind, 0, 12)
    assert console.getvalue() == STAMP + expected


def test_read_error_respects_verbosity(tmp_path: Path) -> None:
    files = FileRegistry()
    files.register(FileKind.HOSTS, "Hosts.conf")
    log, console = build_log(tmp_path, verbosity_level=1, files=files)

    log.log_from_read_error(ReadTextKind.HOSTS, 0, 3)
    assert console.getvalue() == ""


def test_read_error_bad_index_raises(tmp_path: Path) -> None:
    files = FileRegistry()
    files.register(FileKind.HOSTS, "Hosts.conf")
    log, _ = build_log(tmp_path, files=files)

    with pytest.raises(RegistryError):
        log.log_from_read_error(ReadTextKind.HOSTS, 1, 3)


def test_read_error_unknown_kind_ignored(tmp_path: Path) -> None:
    log, console = build_log(tmp_path)
    log.log_from_read_error(99, 0, 3)  # type: ignore[arg-type]
    assert console.getvalue() == ""


def test_bootstrap_builds_working_log(tmp_path: Path) -> None:
    target = tmp_path / "logs" / "Error.log"
    log = bootstrap(
        LogConfiguration(log_file_path=target, run_mode=RunMode.BACKGROUND, service_name="Proxy"),
        diagnostics_level="ERROR",
    )
    assert log.state.is_console_mode is False
    assert log.log_error(LogLevel.LEVEL_1, LogCategory.NOTICE, "Ready")

    lines = target.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("-> [Notice] Proxy started.")
    assert lines[1].endswith("-> [Notice] Ready.")


def test_bootstrap_keeps_supplied_registry() -> None:
    files = FileRegistry()
    log = bootstrap(diagnostics_level="ERROR", files=files)
    assert log.state.files is files


def test_bootstrap_diagnostics_file_records_write_failures(tmp_path: Path) -> None:
    blocked = tmp_path / "Error.log"
    blocked.mkdir()
    diagnostics_dir = tmp_path / "diagnostics"
    log = bootstrap(
        LogConfiguration(log_file_path=blocked, run_mode=RunMode.BACKGROUND),
        diagnostics_level="WARNING",
        diagnostics_dir=diagnostics_dir,
    )
    try:
        assert log.log_error(LogLevel.LEVEL_1, LogCategory.NOTICE, "Lost") is False
        get_logger().complete()
        content = (diagnostics_dir / DIAGNOSTICS_FILE_NAME).read_text(encoding="utf-8")
        assert "Log file write failed" in content
    finally:
        configure_logging(level="ERROR")
