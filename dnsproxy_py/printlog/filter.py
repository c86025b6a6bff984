"""Verbosity filtering for error log calls."""

from __future__ import annotations

from enum import Enum

from .categories import LogCategory, LogLevel
from .platform import PlatformIO

__all__ = ["FilterVerdict", "LevelFilter"]


class FilterVerdict(Enum):
    PROCEED = "proceed"
    REJECT = "reject"
    SUPPRESS = "suppress"

    @property
    def succeeded(self) -> bool:
        """Result reported to the caller when nothing gets written."""

        return self is FilterVerdict.SUPPRESS


class LevelFilter:
    """Decide whether a call reaches the formatter.

    Unreachable network errors are muted below level 3 and reported as
    success, so callers retrying on failure do not amplify transient outages.
    """

    def __init__(self, configured_level: int, platform: PlatformIO) -> None:
        self.configured_level = configured_level
        self.platform = platform

    def check(
        self,
        level: int,
        category: object,
        message: str | None,
        error_code: int = 0,
    ) -> FilterVerdict:
        if self.configured_level == LogLevel.OFF or level > self.configured_level:
            return FilterVerdict.REJECT
        if not message:
            return FilterVerdict.REJECT
        if (
            category == LogCategory.NETWORK
            and self.configured_level < LogLevel.LEVEL_3
            and error_code in self.platform.unreachable_codes
        ):
            return FilterVerdict.SUPPRESS
        return FilterVerdict.PROCEED
