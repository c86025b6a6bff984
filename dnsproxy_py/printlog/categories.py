"""Levels, categories and server roles used by the error log."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "LogCategory",
    "LogLevel",
    "ReadTextKind",
    "ServerType",
    "category_tag",
    "resolve_category",
    "server_role_label",
]


class LogLevel(IntEnum):
    OFF = 0
    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3


class LogCategory(IntEnum):
    NOTICE = 1
    SYSTEM = 2
    PARAMETER = 3
    FILTER = 4
    HOSTS = 5
    NETWORK = 6
    CAPTURE = 7
    CRYPTO = 8
    SOCKS = 9
    HTTP = 10


_CATEGORY_TAGS: dict[LogCategory, str] = {
    LogCategory.NOTICE: "Notice",
    LogCategory.SYSTEM: "System Error",
    LogCategory.PARAMETER: "Parameter Error",
    LogCategory.FILTER: "Filter Error",
    LogCategory.HOSTS: "Hosts Error",
    LogCategory.NETWORK: "Network Error",
    LogCategory.CAPTURE: "Capture Error",
    LogCategory.CRYPTO: "Crypto Error",
    LogCategory.SOCKS: "Proxy-SOCKS Error",
    LogCategory.HTTP: "Proxy-HTTP Error",
}


class ReadTextKind(IntEnum):
    HOSTS = 1
    FILTER = 2
    PARAMETER = 3
    PARAMETER_MONITOR = 4


class ServerType(IntEnum):
    MAIN_IPV6 = 1
    MAIN_IPV4 = 2
    ALTERNATE_IPV6 = 3
    ALTERNATE_IPV4 = 4


_SERVER_ROLES: dict[ServerType, str] = {
    ServerType.MAIN_IPV6: "IPv6 Main Server",
    ServerType.MAIN_IPV4: "IPv4 Main Server",
    ServerType.ALTERNATE_IPV6: "IPv6 Alternate Server",
    ServerType.ALTERNATE_IPV4: "IPv4 Alternate Server",
}


def resolve_category(value: object) -> LogCategory | None:
    """Return the category named by ``value`` or ``None`` if it names none."""

    if isinstance(value, LogCategory):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    try:
        return LogCategory(value)
    except ValueError:
        return None


def category_tag(category: LogCategory) -> str:
    return _CATEGORY_TAGS[category]


def server_role_label(server_type: object) -> str:
    if isinstance(server_type, bool) or not isinstance(server_type, int):
        return ""
    try:
        return _SERVER_ROLES[ServerType(server_type)]
    except ValueError:
        return ""
