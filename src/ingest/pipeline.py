"""Category import orchestration.

This module composes registry lookup, dataset fetch, and materialization
into one import invocation, and runs independent invocations concurrently.
"""

from __future__ import annotations

import asyncio
from typing import Iterable

import httpx

from core.config import ImporterConfig
from core.errors import ImporterError
from core.logging_config import get_logger
from core.types import MaterializationReport
from ingest.catalog_registry import resolve_locator
from ingest.dataset_fetcher import DatasetFetcher
from store.materializer import Materializer
from store.vault_storage import StorageTree
from transforms.record_markdown import resolve_transform

_LOGGER = get_logger(__name__)


async def import_category(
    category: str,
    config: ImporterConfig,
    storage: StorageTree,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MaterializationReport:
    """Fetch one category dataset and materialize it into storage.

    Args:
        category: Catalog category name.
        config: Runtime configuration.
        storage: Storage tree receiving documents.
        transport: Optional httpx transport override.

    Returns:
        Materialization report for the category.

    Raises:
        UnknownCategoryError: If the category is not in the catalog.
        FetchError: If retrieval or decoding fails.
        MaterializationAbortedError: If the container cannot be prepared.
    """
    transform = resolve_transform(config.transform_name)
    locator = resolve_locator(category)
    _LOGGER.info("import_started", category=category, locator=locator)
    try:
        dataset = await DatasetFetcher(config, transport).fetch(locator)
        materializer = Materializer(storage, transform, config.collision_policy)
        report = materializer.materialize(category, dataset)
    except ImporterError as error:
        _LOGGER.error(
            "import_failed",
            category=category,
            error_type=type(error).__name__,
            error=str(error),
        )
        raise
    except asyncio.CancelledError:
        _LOGGER.warning("import_cancelled", category=category)
        raise
    _log_import_completion(report)
    return report


async def import_categories(
    categories: Iterable[str],
    config: ImporterConfig,
    storage: StorageTree,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, MaterializationReport | ImporterError]:
    """Import several categories concurrently.

    Args:
        categories: Category names; duplicates are imported once.
        config: Runtime configuration.
        storage: Storage tree receiving documents.
        transport: Optional httpx transport override.

    Returns:
        Mapping of category to its report, or to the error that stopped it.
    """
    unique_categories = list(dict.fromkeys(categories))
    outcomes = await asyncio.gather(
        *(
            _import_capturing_errors(category, config, storage, transport)
            for category in unique_categories
        )
    )
    return dict(zip(unique_categories, outcomes))


async def _import_capturing_errors(
    category: str,
    config: ImporterConfig,
    storage: StorageTree,
    transport: httpx.AsyncBaseTransport | None,
) -> MaterializationReport | ImporterError:
    try:
        return await import_category(category, config, storage, transport)
    except ImporterError as error:
        return error


def _log_import_completion(report: MaterializationReport) -> None:
    """Log import completion with report counts."""
    _LOGGER.info(
        "import_completed",
        category=report.category,
        total=report.total,
        written=report.written,
        skipped=report.skipped,
        failed=report.failed,
        first_record_name=report.first_record_name,
    )
