"""Shared typed models.

This module defines immutable data models used by the registry, fetcher,
materializer, and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Mapping

from core.constants import DEFAULT_MY_SETTING, RECORD_NAME_FIELD

SkipReason = Literal["missing_name", "invalid_name", "duplicate_name", "exists"]


@dataclass(frozen=True)
class DatasetRecord:
    """One decoded entry of a remote dataset.

    Attributes:
        index: Zero-based position of the record in the dataset.
        fields: Field name to JSON value mapping, in payload order.
    """

    index: int
    fields: Mapping[str, Any]

    @property
    def name(self) -> Any:
        """Raw ``name`` field value, or None when absent."""
        return self.fields.get(RECORD_NAME_FIELD)


Dataset = tuple[DatasetRecord, ...]
RecordTransform = Callable[[DatasetRecord], str]


@dataclass(frozen=True)
class SkippedRecord:
    """Record left out of materialization without an error.

    Attributes:
        index: Dataset position of the record.
        name: Raw name value when present.
        reason: Why the record was skipped.
    """

    index: int
    name: str | None
    reason: SkipReason


@dataclass(frozen=True)
class FailedRecord:
    """Record whose document could not be produced.

    Attributes:
        index: Dataset position of the record.
        name: Record name.
        cause: Rendered error that stopped the write.
    """

    index: int
    name: str
    cause: str


@dataclass(frozen=True)
class MaterializationReport:
    """Summary of one materialize call.

    Attributes:
        category: Category that was materialized.
        total: Number of records seen.
        written_documents: Document paths written, in dataset order.
        skipped_records: Skipped record entries, in dataset order.
        failed_records: Failed record entries, in dataset order.
        record_names: Valid record names, in dataset order.
    """

    category: str
    total: int
    written_documents: tuple[str, ...] = ()
    skipped_records: tuple[SkippedRecord, ...] = ()
    failed_records: tuple[FailedRecord, ...] = ()
    record_names: tuple[str, ...] = field(default=(), repr=False)

    @property
    def written(self) -> int:
        return len(self.written_documents)

    @property
    def skipped(self) -> int:
        return len(self.skipped_records)

    @property
    def failed(self) -> int:
        return len(self.failed_records)

    @property
    def first_record_name(self) -> str | None:
        """Name of the first processable record, used for host notices."""
        return self.record_names[0] if self.record_names else None


@dataclass(frozen=True)
class PluginSettings:
    """Persisted free-text plugin setting.

    Attributes:
        my_setting: User-provided value, unused by the import pipeline.
    """

    my_setting: str = DEFAULT_MY_SETTING
