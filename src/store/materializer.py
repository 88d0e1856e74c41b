"""Dataset materialization into the storage tree.

This module writes one document per dataset record under a category
container. Container setup failures abort the call; per-record problems
are collected into the returned report and never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.constants import DOCUMENT_FILE_EXTENSION, INVALID_NAME_CHARACTERS
from core.errors import (
    ContainerExistsError,
    DocumentExistsError,
    MaterializationAbortedError,
    StorageError,
)
from core.logging_config import get_logger
from core.types import (
    Dataset,
    DatasetRecord,
    FailedRecord,
    MaterializationReport,
    RecordTransform,
    SkippedRecord,
    SkipReason,
)
from store.vault_storage import StorageTree

_LOGGER = get_logger(__name__)


@dataclass
class _ReportBuilder:
    """Mutable accumulator frozen into a MaterializationReport."""

    category: str
    total: int
    written_documents: list[str] = field(default_factory=list)
    skipped_records: list[SkippedRecord] = field(default_factory=list)
    failed_records: list[FailedRecord] = field(default_factory=list)
    record_names: list[str] = field(default_factory=list)

    def skip(self, record: DatasetRecord, reason: SkipReason) -> None:
        name = record.name if isinstance(record.name, str) else None
        self.skipped_records.append(SkippedRecord(index=record.index, name=name, reason=reason))
        _LOGGER.info(
            "record_skipped",
            category=self.category,
            index=record.index,
            record_name=name,
            reason=reason,
        )

    def fail(self, record: DatasetRecord, name: str, error: Exception) -> None:
        self.failed_records.append(FailedRecord(index=record.index, name=name, cause=str(error)))
        _LOGGER.warning(
            "record_failed",
            category=self.category,
            index=record.index,
            record_name=name,
            error=str(error),
        )

    def build(self) -> MaterializationReport:
        return MaterializationReport(
            category=self.category,
            total=self.total,
            written_documents=tuple(self.written_documents),
            skipped_records=tuple(self.skipped_records),
            failed_records=tuple(self.failed_records),
            record_names=tuple(self.record_names),
        )


class Materializer:
    """Writes dataset records as documents in a storage tree."""

    def __init__(
        self,
        storage: StorageTree,
        transform: RecordTransform,
        collision_policy: str = "skip",
    ) -> None:
        """Create a materializer.

        Args:
            storage: Storage tree receiving containers and documents.
            transform: Pure record-to-content function.
            collision_policy: ``skip``, ``overwrite``, or ``error`` for
                documents that already exist in the storage tree.
        """
        self._storage = storage
        self._transform = transform
        self._collision_policy = collision_policy

    def materialize(self, category: str, dataset: Dataset) -> MaterializationReport:
        """Write every valid record of a dataset under its category container.

        Args:
            category: Category name, also the container path.
            dataset: Decoded records in source order.

        Returns:
            Report with written, skipped, and failed entries in dataset order.

        Raises:
            MaterializationAbortedError: If the container cannot be created
                for a reason other than already existing.
        """
        self._ensure_container(category)
        builder = _ReportBuilder(category=category, total=len(dataset))
        seen_names: set[str] = set()
        for record in dataset:
            self._materialize_record(builder, seen_names, record)
        return builder.build()

    def _ensure_container(self, category: str) -> None:
        try:
            self._storage.create_container(category)
        except ContainerExistsError:
            _LOGGER.info("container_exists", category=category)
        except StorageError as error:
            raise MaterializationAbortedError(
                f"Failed to prepare container for category '{category}': {error}. "
                "Fix the storage location and retry the import."
            ) from error

    def _materialize_record(
        self,
        builder: _ReportBuilder,
        seen_names: set[str],
        record: DatasetRecord,
    ) -> None:
        name = record.name
        if name is None:
            builder.skip(record, "missing_name")
            return
        if not is_valid_document_name(name):
            builder.skip(record, "invalid_name")
            return
        identity = name.casefold()
        if identity in seen_names:
            builder.skip(record, "duplicate_name")
            return
        seen_names.add(identity)
        builder.record_names.append(name)
        try:
            content = self._transform(record)
        except Exception as error:
            builder.fail(record, name, error)
            return
        document_path = build_document_path(builder.category, name)
        self._write_document(builder, record, name, document_path, content)

    def _write_document(
        self,
        builder: _ReportBuilder,
        record: DatasetRecord,
        name: str,
        document_path: str,
        content: str,
    ) -> None:
        overwrite = self._collision_policy == "overwrite"
        try:
            self._storage.create_document(document_path, content, overwrite=overwrite)
        except DocumentExistsError as error:
            if self._collision_policy == "skip":
                builder.skip(record, "exists")
            else:
                builder.fail(record, name, error)
            return
        except StorageError as error:
            builder.fail(record, name, error)
            return
        builder.written_documents.append(document_path)


def build_document_path(category: str, name: str) -> str:
    """Build the storage path of a record document."""
    return f"{category}/{name}{DOCUMENT_FILE_EXTENSION}"


def is_valid_document_name(name: object) -> bool:
    """Return whether a record name can be used as a document file name."""
    if not isinstance(name, str) or not name.strip():
        return False
    if name != name.strip() or name in (".", ".."):
        return False
    if any(character in INVALID_NAME_CHARACTERS for character in name):
        return False
    return all(character.isprintable() for character in name)
