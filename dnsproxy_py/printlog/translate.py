"""Translate platform status codes into readable text."""

from __future__ import annotations

import string

from ..core.logging import get_logger
from .platform import PlatformIO

__all__ = ["CODE_PLACEHOLDER", "ErrorCodeTranslator"]

CODE_PLACEHOLDER = "${code}"

_TRAILING = ".,;:!?" + string.whitespace

logger = get_logger()


class ErrorCodeTranslator:
    def __init__(self, platform: PlatformIO) -> None:
        self.platform = platform

    def suffix(self, error_code: int) -> str:
        """Return the code suffix for a message template.

        The numeric code itself stays a placeholder so it is substituted
        together with the line number when the message is rendered.
        """

        if error_code == 0:
            return ""
        description = self.describe(error_code)
        if description is None:
            logger.debug("No description available for status code {}", error_code)
            return f": {CODE_PLACEHOLDER}"
        return f": {_escape(description)} [{CODE_PLACEHOLDER}]"

    def describe(self, error_code: int) -> str | None:
        text = self.platform.describe_error(error_code)
        if text is None:
            return None
        text = text.rstrip(_TRAILING)
        return text or None


def _escape(text: str) -> str:
    return text.replace("$", "$$")
