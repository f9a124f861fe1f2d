import pytest
from pathlib import Path

from mtime_sync.exceptions import UnsupportedAdapterError
from mtime_sync.models import FileRef
from mtime_sync.storage.adapters import FileSystemAdapter, StorageAdapter, resolve_absolute_path


class RemoteAdapter(StorageAdapter):
    pass


def test_resolves_relative_path_under_root(vault):
    adapter = FileSystemAdapter(vault)
    assert resolve_absolute_path(adapter, FileRef("a.md")) == vault / "a.md"


def test_resolves_nested_vault_path(vault):
    adapter = FileSystemAdapter(vault)
    path = resolve_absolute_path(adapter, FileRef("daily/c.md"))
    assert path == vault / "daily" / "c.md"
    assert path.is_absolute()


def test_relative_root_becomes_absolute(monkeypatch, vault):
    monkeypatch.chdir(vault.parent)
    path = resolve_absolute_path(FileSystemAdapter(Path("vault")), FileRef("a.md"))
    assert path == vault / "a.md"


def test_non_filesystem_adapter_rejected():
    with pytest.raises(UnsupportedAdapterError) as exc_info:
        resolve_absolute_path(RemoteAdapter(), FileRef("a.md"))

    assert exc_info.value.stage == "resolve"
    assert "RemoteAdapter" in str(exc_info.value)


def test_absolute_ref_stays_under_root(vault, tmp_path):
    adapter = FileSystemAdapter(vault)
    outside = tmp_path / "outside.md"

    path = resolve_absolute_path(adapter, FileRef(str(outside)))

    assert str(path).startswith(str(vault))
    assert path == vault / outside.relative_to(outside.anchor)


def test_leading_slash_is_vault_root(vault):
    adapter = FileSystemAdapter(vault)
    assert resolve_absolute_path(adapter, FileRef("/daily/c.md")) == vault / "daily" / "c.md"


def test_is_folder(vault):
    adapter = FileSystemAdapter(vault)
    assert adapter.is_folder(FileRef("daily"))
    assert not adapter.is_folder(FileRef("a.md"))
    assert not adapter.is_folder(FileRef("missing"))
