"""Compose error log lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import Template

from .categories import LogCategory, category_tag, resolve_category
from .platform import PlatformIO
from .translate import ErrorCodeTranslator

__all__ = ["FormattedMessage", "MessageArguments", "MessageFormatter"]

LINE_PLACEHOLDER = "${line}"


class MessageArguments(Enum):
    """Which numeric values a message template still expects."""

    NONE = "none"
    CODE = "code"
    LINE = "line"
    CODE_AND_LINE = "code_and_line"

    @classmethod
    def for_values(cls, *, has_code: bool, has_line: bool) -> MessageArguments:
        if has_code and has_line:
            return cls.CODE_AND_LINE
        if has_code:
            return cls.CODE
        if has_line:
            return cls.LINE
        return cls.NONE


@dataclass(frozen=True)
class FormattedMessage:
    template: str
    arguments: MessageArguments = MessageArguments.NONE
    error_code: int = 0
    line: int = 0

    def render(self) -> str:
        values: dict[str, object] = {}
        if self.arguments in (MessageArguments.CODE, MessageArguments.CODE_AND_LINE):
            values["code"] = self.error_code
        if self.arguments in (MessageArguments.LINE, MessageArguments.CODE_AND_LINE):
            values["line"] = self.line
        return Template(self.template).substitute(values)


class MessageFormatter:
    def __init__(self, platform: PlatformIO, translator: ErrorCodeTranslator | None = None) -> None:
        self.platform = platform
        self.translator = translator or ErrorCodeTranslator(platform)

    def format(
        self,
        category: object,
        message: str,
        *,
        error_code: int = 0,
        source_file: str | None = None,
        source_line: int = 0,
    ) -> FormattedMessage | None:
        """Build the message for ``category``, ``None`` if it is not a known one."""

        resolved = resolve_category(category)
        if resolved is None:
            return None

        head = f"[{category_tag(resolved)}] {_escape(message)}"
        # Capture errors never report a status code or a source location.
        if resolved is LogCategory.CAPTURE:
            return FormattedMessage(template=head)

        location, has_line = self._location(source_file, source_line)
        template = head + self.translator.suffix(error_code) + location + ".\n"
        return FormattedMessage(
            template=template,
            arguments=MessageArguments.for_values(has_code=error_code != 0, has_line=has_line),
            error_code=error_code,
            line=source_line,
        )

    def _location(self, source_file: str | None, source_line: int) -> tuple[str, bool]:
        if not source_file:
            return "", False
        location = f" in {_escape(self.platform.normalize_location(source_file))}"
        if source_line > 0:
            return f"{location}(Line {LINE_PLACEHOLDER})", True
        return location, False


def _escape(text: str) -> str:
    return text.replace("$", "$$")
