"""Public SDK surface for the SRD vault importer.

This module provides a stable import path for library users.
It re-exports the primary client, typed models, and errors.
"""

from __future__ import annotations

from core.config import ImporterConfig
from core.errors import (
    FetchError,
    ImporterError,
    MalformedPayloadError,
    MaterializationAbortedError,
    RemoteFetchError,
    TransportError,
    UnknownCategoryError,
)
from core.types import (
    DatasetRecord,
    FailedRecord,
    MaterializationReport,
    PluginSettings,
    SkippedRecord,
)
from ingest.catalog_registry import list_categories, resolve_locator
from ingest.dataset_fetcher import DatasetFetcher
from ingest.pipeline import import_categories, import_category
from store.importer_sdk import ImporterClient
from store.materializer import Materializer
from store.settings_store import SettingsStore
from store.vault_storage import FilesystemVault, StorageTree
from transforms.record_markdown import supported_transforms

__all__ = [
    "DatasetFetcher",
    "DatasetRecord",
    "FailedRecord",
    "FetchError",
    "FilesystemVault",
    "ImporterClient",
    "ImporterConfig",
    "ImporterError",
    "MalformedPayloadError",
    "MaterializationAbortedError",
    "MaterializationReport",
    "Materializer",
    "PluginSettings",
    "RemoteFetchError",
    "SettingsStore",
    "SkippedRecord",
    "StorageTree",
    "TransportError",
    "UnknownCategoryError",
    "import_categories",
    "import_category",
    "list_categories",
    "resolve_locator",
    "supported_transforms",
]
