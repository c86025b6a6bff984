"""Registry of text files loaded by the host service."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "FileKind",
    "FileRegistry",
    "LoadedFile",
    "RegistryError",
]


class RegistryError(RuntimeError):
    """Raised when a loaded file cannot be resolved."""


class FileKind(str, Enum):
    HOSTS = "hosts"
    FILTER = "filter"
    CONFIG = "config"


@dataclass(frozen=True)
class LoadedFile:
    file_name: str
    path: Path | None = None

    @property
    def display_name(self) -> str:
        return self.file_name


class FileRegistry:
    """Index-addressable lists of hosts, filter and configuration files."""

    def __init__(self) -> None:
        self._files: dict[FileKind, list[LoadedFile]] = {kind: [] for kind in FileKind}

    def register(self, kind: FileKind, file_name: str, *, path: Path | None = None) -> int:
        if not file_name:
            raise RegistryError(f"Empty file name for {kind.value} file")
        entries = self._files[FileKind(kind)]
        entries.append(LoadedFile(file_name=file_name, path=path))
        return len(entries) - 1

    def get(self, kind: FileKind, index: int) -> LoadedFile:
        entries = self._files[FileKind(kind)]
        if index < 0 or index >= len(entries):
            raise RegistryError(
                f"No {FileKind(kind).value} file registered at index {index} "
                f"({len(entries)} loaded)"
            )
        return entries[index]

    def display_name(self, kind: FileKind, index: int) -> str:
        return self.get(kind, index).display_name

    def files(self, kind: FileKind) -> Iterable[LoadedFile]:
        yield from self._files[FileKind(kind)]

    def clear(self, kind: FileKind | None = None) -> None:
        if kind is None:
            for entries in self._files.values():
                entries.clear()
            return
        self._files[FileKind(kind)].clear()

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._files.values())
