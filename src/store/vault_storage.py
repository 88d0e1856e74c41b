"""Hierarchical storage tree for generated documents.

This module defines the storage contract consumed by the materializer
and a filesystem-backed vault that implements it on a local directory.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
import tempfile
from typing import Protocol

from core.errors import ContainerExistsError, DocumentExistsError, StorageError


class StorageTree(Protocol):
    """Container and document creation primitives of a storage tree."""

    def create_container(self, path: str) -> None:
        """Create a container, raising ContainerExistsError if present."""
        ...

    def create_document(self, path: str, content: str, overwrite: bool = False) -> None:
        """Create a document, raising DocumentExistsError unless overwriting."""
        ...


class FilesystemVault:
    """Storage tree rooted at a local directory."""

    def __init__(self, root: Path) -> None:
        self._root = root.expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def create_container(self, path: str) -> None:
        """Create one folder directly under an existing parent.

        Args:
            path: Vault-relative POSIX folder path.

        Raises:
            ContainerExistsError: If the folder already exists.
            StorageError: If the path is invalid or creation fails.
        """
        target = self._resolve(path)
        try:
            target.mkdir()
        except FileExistsError as error:
            if target.is_dir():
                raise ContainerExistsError(f"Container already exists: {path}") from error
            raise StorageError(
                f"Cannot create container {path}: a file with that name exists."
            ) from error
        except OSError as error:
            raise StorageError(f"Failed to create container {path}: {error}") from error

    def create_document(self, path: str, content: str, overwrite: bool = False) -> None:
        """Write a document atomically.

        Args:
            path: Vault-relative POSIX document path.
            content: Document text.
            overwrite: Replace an existing document instead of failing.

        Raises:
            DocumentExistsError: If the document exists and overwrite is off.
            StorageError: If the path is invalid or the write fails.
        """
        target = self._resolve(path)
        try:
            if not target.parent.is_dir():
                raise StorageError(
                    f"Cannot create document {path}: parent container is missing."
                )
            _write_atomic(target, content, overwrite)
        except FileExistsError as error:
            raise DocumentExistsError(f"Document already exists: {path}") from error
        except OSError as error:
            raise StorageError(f"Failed to write document {path}: {error}") from error

    def _resolve(self, path: str) -> Path:
        """Map a vault-relative path onto the filesystem, refusing escapes."""
        relative = PurePosixPath(path)
        if not path or relative.is_absolute() or ".." in relative.parts:
            raise StorageError(f"Invalid vault path '{path}': must be relative inside the vault.")
        return self._root.joinpath(*relative.parts)


def _write_atomic(target: Path, content: str, overwrite: bool) -> None:
    """Write through a temp file; without overwrite, linking fails if target exists."""
    file_descriptor, temp_name = tempfile.mkstemp(dir=target.parent, prefix=".tmp-")
    try:
        with os.fdopen(file_descriptor, "w", encoding="utf-8") as handle:
            handle.write(content)
        if overwrite:
            os.replace(temp_name, target)
        else:
            os.link(temp_name, target)
    finally:
        Path(temp_name).unlink(missing_ok=True)
