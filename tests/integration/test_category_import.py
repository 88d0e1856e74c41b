"""Integration tests for the fetch, transform, and persist workflow."""

from __future__ import annotations

import asyncio
from dataclasses import replace

import httpx
import pytest
import yaml

from core.config import ImporterConfig
from core.errors import (
    MalformedPayloadError,
    MaterializationAbortedError,
    RemoteFetchError,
    UnknownCategoryError,
)
from ingest.catalog_registry import resolve_locator
from ingest.pipeline import import_categories, import_category
from store.importer_sdk import ImporterClient
from store.vault_storage import FilesystemVault
from tests.fixture_paths import fixture_path, routing_transport

RACES_BODY = fixture_path("races.json").read_bytes()


def _races_transport(status_code: int = 200, body: bytes = RACES_BODY) -> httpx.MockTransport:
    return routing_transport({resolve_locator("Races"): httpx.Response(status_code, content=body)})


def test_client_imports_races_into_vault(importer_config: ImporterConfig) -> None:
    """End-to-end import should create one Markdown file per race."""
    client = ImporterClient(importer_config, _races_transport())

    report = client.import_category("Races")

    races_dir = importer_config.vault_root / "Races"
    assert report.written == 3 and report.first_record_name == "Dwarf"
    assert sorted(path.name for path in races_dir.iterdir()) == [
        "Dwarf.md",
        "Elf.md",
        "Halfling.md",
    ]
    front_matter = (races_dir / "Dwarf.md").read_text(encoding="utf-8").split("---\n")[1]
    assert yaml.safe_load(front_matter)["speed"] == 25


def test_reimport_skips_existing_documents(importer_config: ImporterConfig) -> None:
    """Second import into an existing folder should succeed and skip collisions."""
    client = ImporterClient(importer_config, _races_transport())
    client.import_category("Races")

    report = client.import_category("Races")

    assert (report.written, report.skipped, report.failed) == (0, 3, 0)


def test_reimport_with_overwrite_policy_rewrites(importer_config: ImporterConfig) -> None:
    """Overwrite policy should write every record again."""
    ImporterClient(importer_config, _races_transport()).import_category("Races")
    config = replace(importer_config, collision_policy="overwrite")

    report = ImporterClient(config, _races_transport()).import_category("Races")

    assert report.written == 3


@pytest.mark.asyncio
async def test_http_error_never_reaches_storage(
    importer_config: ImporterConfig,
    vault: FilesystemVault,
) -> None:
    """A 404 should surface as RemoteFetchError before any folder is created."""
    with pytest.raises(RemoteFetchError) as error_info:
        await import_category("Races", importer_config, vault, _races_transport(404))

    assert error_info.value.status_code == 404
    assert not (importer_config.vault_root / "Races").exists()


@pytest.mark.asyncio
async def test_malformed_payload_never_reaches_storage(
    importer_config: ImporterConfig,
    vault: FilesystemVault,
) -> None:
    """A non-array payload should fail the import without writes."""
    transport = _races_transport(body=b'{"results": []}')

    with pytest.raises(MalformedPayloadError):
        await import_category("Races", importer_config, vault, transport)

    assert list(importer_config.vault_root.iterdir()) == []


@pytest.mark.asyncio
async def test_unknown_category_fails_before_fetch(
    importer_config: ImporterConfig,
    vault: FilesystemVault,
) -> None:
    """Unknown categories should fail without touching the network."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[])

    with pytest.raises(UnknownCategoryError):
        await import_category("Dragons", importer_config, vault, httpx.MockTransport(handler))

    assert requests == []


@pytest.mark.asyncio
async def test_container_failure_aborts_import(importer_config: ImporterConfig) -> None:
    """A file blocking the category folder should abort the import."""
    (importer_config.vault_root / "Races").write_text("not a folder", encoding="utf-8")
    vault = FilesystemVault(importer_config.vault_root)

    with pytest.raises(MaterializationAbortedError):
        await import_category("Races", importer_config, vault, _races_transport())

    assert (importer_config.vault_root / "Races").is_file()


def test_import_categories_isolates_failures(importer_config: ImporterConfig) -> None:
    """Concurrent imports should report each category independently."""
    routes = {
        resolve_locator("Races"): httpx.Response(200, content=RACES_BODY),
        resolve_locator("Spells"): httpx.Response(503),
        resolve_locator("Conditions"): httpx.Response(
            200, json=[{"name": "Blinded", "desc": ["Cannot see."]}, {"index": "x"}]
        ),
    }
    vault = FilesystemVault(importer_config.vault_root)

    outcomes = asyncio.run(
        import_categories(
            ["Races", "Spells", "Conditions", "Races"],
            importer_config,
            vault,
            routing_transport(routes),
        )
    )

    assert list(outcomes) == ["Races", "Spells", "Conditions"]
    assert isinstance(outcomes["Spells"], RemoteFetchError)
    assert outcomes["Races"].written == 3
    assert (outcomes["Conditions"].written, outcomes["Conditions"].skipped) == (1, 1)


@pytest.mark.asyncio
async def test_cancelled_import_propagates_without_writes(
    importer_config: ImporterConfig,
    vault: FilesystemVault,
) -> None:
    """Cancelling during the network wait should propagate and write nothing."""
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.Event().wait()
        return httpx.Response(200, json=[])

    task = asyncio.create_task(
        import_category("Races", importer_config, vault, httpx.MockTransport(handler))
    )
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert not (importer_config.vault_root / "Races").exists()
