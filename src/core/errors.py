"""Importer exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ImporterError(Exception):
    """Base exception for all importer failures."""


class ImporterConfigError(ImporterError):
    """Raised for invalid runtime configuration."""


class UnknownCategoryError(ImporterError):
    """Raised when a category is not present in the catalog registry."""

    def __init__(self, category: str) -> None:
        super().__init__(
            f"Unknown category '{category}'. "
            "Run 'srd-importer categories' to list supported categories."
        )
        self.category = category


class FetchError(ImporterError):
    """Base class for dataset retrieval failures."""


class TransportError(FetchError):
    """Raised when the network transport fails before a response arrives."""


class RemoteFetchError(FetchError):
    """Raised when the remote answers with a non-success status."""

    def __init__(self, locator: str, status_code: int) -> None:
        super().__init__(
            f"Failed to fetch dataset from {locator}: HTTP status {status_code}. "
            "Check the category source and retry."
        )
        self.locator = locator
        self.status_code = status_code


class MalformedPayloadError(FetchError):
    """Raised when a response body is not a JSON array of objects."""


class StorageError(ImporterError):
    """Raised for storage tree failures."""


class ContainerExistsError(StorageError):
    """Raised when a container being created already exists."""


class DocumentExistsError(StorageError):
    """Raised when a document being created already exists."""


class MaterializationAbortedError(ImporterError):
    """Raised when a category container cannot be prepared."""


class SettingsError(ImporterError):
    """Raised for settings load and save failures."""
