"""Shared pytest fixtures for importer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import ImporterConfig
from store.vault_storage import FilesystemVault


@pytest.fixture
def importer_config(tmp_path: Path) -> ImporterConfig:
    """Config pointing at an existing empty vault under tmp_path."""
    vault_root = tmp_path / "vault"
    vault_root.mkdir()
    return ImporterConfig(vault_root=vault_root)


@pytest.fixture
def vault(importer_config: ImporterConfig) -> FilesystemVault:
    """Filesystem vault rooted at the configured vault root."""
    return FilesystemVault(importer_config.vault_root)
