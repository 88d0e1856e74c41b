"""Python SDK for category imports.

This module exposes a high-level client that wires configuration,
the vault storage tree, settings, and the import pipeline together.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from pathlib import Path
from typing import Iterable

import httpx

from core.config import ImporterConfig
from core.errors import ImporterError
from core.types import MaterializationReport
from ingest.catalog_registry import list_categories
from ingest.pipeline import import_categories, import_category
from store.settings_store import SettingsStore
from store.vault_storage import FilesystemVault


class ImporterClient:
    """Primary SDK entry point for vault imports."""

    def __init__(
        self,
        config: ImporterConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            transport: Optional httpx transport override for all fetches.
        """
        self._config = config or ImporterConfig.from_env()
        self._config.vault_root.mkdir(parents=True, exist_ok=True)
        self._vault = FilesystemVault(self._config.vault_root)
        self._transport = transport

    @property
    def config(self) -> ImporterConfig:
        return self._config

    def categories(self) -> tuple[str, ...]:
        """List importable category names."""
        return list_categories()

    def settings(self) -> SettingsStore:
        """Get the settings store of this vault."""
        return SettingsStore.for_vault(self._config.vault_root)

    def import_category(self, category: str) -> MaterializationReport:
        """Import one category into the vault.

        Args:
            category: Catalog category name.

        Returns:
            Materialization report.

        Raises:
            UnknownCategoryError: If the category is unknown.
            FetchError: If the dataset cannot be retrieved.
            MaterializationAbortedError: If the category folder cannot be created.
        """
        return asyncio.run(self.import_category_async(category))

    async def import_category_async(self, category: str) -> MaterializationReport:
        """Async variant of :meth:`import_category`."""
        return await import_category(category, self._config, self._vault, self._transport)

    def import_categories(
        self,
        categories: Iterable[str],
    ) -> dict[str, MaterializationReport | ImporterError]:
        """Import several categories concurrently.

        Args:
            categories: Catalog category names.

        Returns:
            Mapping of category to report or fatal error.
        """
        return asyncio.run(
            import_categories(categories, self._config, self._vault, self._transport)
        )

    def with_vault_root(self, vault_root: str) -> "ImporterClient":
        """Clone the client with a different vault root.

        Args:
            vault_root: New vault root path.

        Returns:
            New SDK client instance.
        """
        resolved_root = Path(vault_root).expanduser().resolve()
        updated_config = replace(self._config, vault_root=resolved_root)
        return ImporterClient(updated_config, self._transport)
