"""Unit tests for the filesystem vault."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import ContainerExistsError, DocumentExistsError, StorageError
from store.vault_storage import FilesystemVault


def test_create_container_makes_folder(vault: FilesystemVault) -> None:
    """Container creation should create a folder under the root."""
    vault.create_container("Races")

    assert (vault.root / "Races").is_dir()


def test_create_container_raises_exists_for_existing_folder(vault: FilesystemVault) -> None:
    """Second creation should report that the container exists."""
    vault.create_container("Races")

    with pytest.raises(ContainerExistsError):
        vault.create_container("Races")

    assert (vault.root / "Races").is_dir()


def test_create_container_rejects_file_in_the_way(vault: FilesystemVault) -> None:
    """A file occupying the folder name is not an existing container."""
    (vault.root / "Races").write_text("oops", encoding="utf-8")

    with pytest.raises(StorageError) as error_info:
        vault.create_container("Races")

    assert not isinstance(error_info.value, ContainerExistsError)


def test_create_container_fails_when_vault_root_is_missing(tmp_path: Path) -> None:
    """Missing parent folders are a storage failure, not an exists case."""
    vault = FilesystemVault(tmp_path / "missing")

    with pytest.raises(StorageError) as error_info:
        vault.create_container("Races")

    assert not isinstance(error_info.value, ContainerExistsError)


@pytest.mark.parametrize("path", ["", "/etc", "../outside", "Races/../../outside"])
def test_vault_rejects_paths_outside_root(vault: FilesystemVault, path: str) -> None:
    """Absolute and parent-relative paths should never touch the filesystem."""
    with pytest.raises(StorageError):
        vault.create_container(path)

    assert not (vault.root.parent / "outside").exists()


def test_create_document_writes_content(vault: FilesystemVault) -> None:
    """Document creation should persist the given text."""
    vault.create_container("Races")

    vault.create_document("Races/Elf.md", "# Elf\n")

    assert (vault.root / "Races" / "Elf.md").read_text(encoding="utf-8") == "# Elf\n"


def test_create_document_refuses_existing_without_overwrite(vault: FilesystemVault) -> None:
    """Existing documents should be protected unless overwriting."""
    vault.create_container("Races")
    vault.create_document("Races/Elf.md", "first")

    with pytest.raises(DocumentExistsError):
        vault.create_document("Races/Elf.md", "second")

    assert (vault.root / "Races" / "Elf.md").read_text(encoding="utf-8") == "first"


def test_create_document_overwrites_when_requested(vault: FilesystemVault) -> None:
    """Overwrite should replace content and leave no temp files."""
    vault.create_container("Races")
    vault.create_document("Races/Elf.md", "first")

    vault.create_document("Races/Elf.md", "second", overwrite=True)

    assert [path.name for path in (vault.root / "Races").iterdir()] == ["Elf.md"]
    assert (vault.root / "Races" / "Elf.md").read_text(encoding="utf-8") == "second"


def test_create_document_requires_container(vault: FilesystemVault) -> None:
    """Writing into a missing container should fail."""
    with pytest.raises(StorageError):
        vault.create_document("Races/Elf.md", "text")

    assert not (vault.root / "Races").exists()


def test_create_document_wraps_overlong_name(vault: FilesystemVault) -> None:
    """A name past the filesystem limit should surface as a storage error."""
    vault.create_container("Races")

    with pytest.raises(StorageError) as error_info:
        vault.create_document(f"Races/{'x' * 300}.md", "text")

    assert not isinstance(error_info.value, DocumentExistsError)
    assert list((vault.root / "Races").iterdir()) == []


def test_create_document_refuses_existing_without_existence_check(
    vault: FilesystemVault,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """No-clobber writes should hold even if an existence check would be stale."""
    vault.create_container("Races")
    vault.create_document("Races/Elf.md", "first")
    monkeypatch.setattr(Path, "exists", lambda self, **kwargs: False)

    with pytest.raises(DocumentExistsError):
        vault.create_document("Races/Elf.md", "second")

    assert [path.name for path in (vault.root / "Races").iterdir()] == ["Elf.md"]
    assert (vault.root / "Races" / "Elf.md").read_text(encoding="utf-8") == "first"
