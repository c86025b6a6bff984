from __future__ import annotations

from pathlib import Path

import pytest
from dnsproxy_py.core.registry import FileKind, FileRegistry, RegistryError


def test_register_returns_sequential_indices() -> None:
    registry = FileRegistry()
    assert registry.register(FileKind.HOSTS, "Hosts.conf") == 0
    assert registry.register(FileKind.HOSTS, "Hosts.ini") == 1
    assert registry.register(FileKind.FILTER, "IPFilter.conf") == 0
    assert len(registry) == 3


def test_display_name_per_kind(tmp_path: Path) -> None:
    registry = FileRegistry()
    registry.register(FileKind.CONFIG, "Config.ini", path=tmp_path / "Config.ini")
    registry.register(FileKind.HOSTS, "Hosts.conf")
    assert registry.display_name(FileKind.CONFIG, 0) == "Config.ini"
    assert registry.display_name(FileKind.HOSTS, 0) == "Hosts.conf"
    assert registry.get(FileKind.CONFIG, 0).path == tmp_path / "Config.ini"


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_out_of_range_index_raises(index: int) -> None:
    registry = FileRegistry()
    registry.register(FileKind.FILTER, "IPFilter.conf")
    with pytest.raises(RegistryError):
        registry.get(FileKind.FILTER, index)


def test_empty_file_name_rejected() -> None:
    with pytest.raises(RegistryError):
        FileRegistry().register(FileKind.HOSTS, "")


def test_clear_single_kind() -> None:
    registry = FileRegistry()
    registry.register(FileKind.HOSTS, "Hosts.conf")
    registry.register(FileKind.CONFIG, "Config.ini")
    registry.clear(FileKind.HOSTS)
    assert list(registry.files(FileKind.HOSTS)) == []
    assert [entry.file_name for entry in registry.files(FileKind.CONFIG)] == ["Config.ini"]
    registry.clear()
    assert len(registry) == 0
