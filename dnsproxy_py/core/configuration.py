"""Configuration management utilities."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

__all__ = [
    "LOG_MAX_SIZE_DEFAULT",
    "LOG_MAX_SIZE_MINIMUM",
    "ConfigurationError",
    "LogConfiguration",
    "PlatformChoice",
    "RunMode",
    "load_configuration",
    "save_configuration",
]

LOG_MAX_SIZE_MINIMUM = 4 * 1024
LOG_MAX_SIZE_DEFAULT = 8 * 1024 * 1024


class ConfigurationError(RuntimeError):
    """Raised when configuration files cannot be parsed."""


class RunMode(str, Enum):
    INTERACTIVE = "interactive"
    BACKGROUND = "background"


class PlatformChoice(str, Enum):
    AUTO = "auto"
    POSIX = "posix"
    WINDOWS = "windows"


class LogConfiguration(BaseModel):
    """Settings supplied by the host service for its error log."""

    verbosity_level: int = Field(default=3, ge=0, le=3)
    max_log_file_size: int = Field(default=LOG_MAX_SIZE_DEFAULT, ge=LOG_MAX_SIZE_MINIMUM)
    log_file_path: Path | None = None
    run_mode: RunMode = Field(default=RunMode.INTERACTIVE)
    encoding: str = Field(default="utf-8", min_length=1)
    service_name: str = Field(default="Pcap_DNSProxy", min_length=1)
    platform: PlatformChoice = Field(default=PlatformChoice.AUTO)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


def load_configuration(path: Path) -> LogConfiguration:
    """Load configuration from a JSON file."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Configuration file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON configuration: {path}") from exc

    try:
        return LogConfiguration.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def save_configuration(config: LogConfiguration, path: Path) -> None:
    """Persist configuration to disk."""

    payload = json.loads(config.model_dump_json(indent=2))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
