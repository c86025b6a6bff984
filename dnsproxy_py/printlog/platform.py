"""Platform capabilities used by the error log.

Everything that differs between POSIX and Windows hosts (file size lookup,
deletion, system error text, path separators and the socket error numbers
for unreachable networks) sits behind :class:`PlatformIO` so the rest of the
subsystem stays platform independent.
"""

from __future__ import annotations

import errno
import os
from typing import Protocol

from ..core.configuration import PlatformChoice

__all__ = [
    "PlatformIO",
    "PosixPlatformIO",
    "WindowsPlatformIO",
    "select_platform",
]

WSAENETUNREACH = 10051
WSAEHOSTUNREACH = 10065


class PlatformIO(Protocol):
    name: str

    @property
    def unreachable_codes(self) -> frozenset[int]: ...

    def file_size(self, path: os.PathLike[str] | str) -> int | None:
        """Return the size in bytes, ``None`` if the file does not exist."""
        ...

    def remove(self, path: os.PathLike[str] | str) -> None: ...

    def describe_error(self, code: int) -> str | None: ...

    def normalize_location(self, source_file: str) -> str: ...


class PosixPlatformIO:
    name = "posix"

    @property
    def unreachable_codes(self) -> frozenset[int]:
        return frozenset({errno.ENETUNREACH, errno.EHOSTUNREACH})

    def file_size(self, path: os.PathLike[str] | str) -> int | None:
        try:
            return os.stat(path).st_size
        except FileNotFoundError:
            return None

    def remove(self, path: os.PathLike[str] | str) -> None:
        os.remove(path)

    def describe_error(self, code: int) -> str | None:
        try:
            text = os.strerror(code)
        except (ValueError, OverflowError):
            return None
        return text or None

    def normalize_location(self, source_file: str) -> str:
        return source_file


class WindowsPlatformIO(PosixPlatformIO):
    name = "windows"

    _NO_DESCRIPTION = "<no description>"

    @property
    def unreachable_codes(self) -> frozenset[int]:
        return frozenset({WSAENETUNREACH, WSAEHOSTUNREACH})

    def describe_error(self, code: int) -> str | None:
        import ctypes

        format_error = getattr(ctypes, "FormatError", None)
        if format_error is None:
            return None
        try:
            text = format_error(code & 0xFFFFFFFF)
        except (OSError, ValueError, OverflowError):
            return None
        if not text or text == self._NO_DESCRIPTION:
            return None
        return text

    def normalize_location(self, source_file: str) -> str:
        while "\\\\" in source_file:
            source_file = source_file.replace("\\\\", "\\")
        return source_file


def select_platform(choice: PlatformChoice | str = PlatformChoice.AUTO) -> PlatformIO:
    choice = PlatformChoice(choice)
    if choice is PlatformChoice.AUTO:
        choice = PlatformChoice.WINDOWS if os.name == "nt" else PlatformChoice.POSIX
    if choice is PlatformChoice.WINDOWS:
        return WindowsPlatformIO()
    return PosixPlatformIO()
