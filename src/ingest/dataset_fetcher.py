"""Remote dataset retrieval.

This module downloads one category dataset over HTTP and decodes it
into typed records. Shape checks stop at "array of JSON objects";
per-record field requirements belong to the materializer.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from core.config import ImporterConfig
from core.constants import (
    RETRY_BACKOFF_INITIAL_SECONDS,
    RETRY_BACKOFF_MAX_SECONDS,
    USER_AGENT,
)
from core.errors import MalformedPayloadError, RemoteFetchError, TransportError
from core.types import Dataset, DatasetRecord


class DatasetFetcher:
    """Async HTTP fetcher for catalog datasets."""

    def __init__(
        self,
        config: ImporterConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a fetcher.

        Args:
            config: Runtime configuration for timeout and retry policy.
            transport: Optional httpx transport override.
        """
        self._timeout = config.fetch_timeout_seconds
        self._attempts = config.fetch_attempts
        self._transport = transport

    async def fetch(self, locator: str) -> Dataset:
        """Retrieve and decode the dataset at a locator.

        Args:
            locator: Dataset URL.

        Returns:
            Ordered tuple of decoded records.

        Raises:
            TransportError: If the request never produced a response.
            RemoteFetchError: If the response status is not 2xx.
            MalformedPayloadError: If the body is not a JSON array of objects.
        """
        body = await self._download_with_retry(locator)
        return decode_dataset(locator, body)

    async def _download_with_retry(self, locator: str) -> bytes:
        if self._attempts == 1:
            return await self._download(locator)
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=wait_exponential_jitter(
                initial=RETRY_BACKOFF_INITIAL_SECONDS,
                max=RETRY_BACKOFF_MAX_SECONDS,
            ),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._download(locator)
        raise AssertionError("unreachable: tenacity reraises the final error")

    async def _download(self, locator: str) -> bytes:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(locator, headers=headers)
        except httpx.RequestError as error:
            raise TransportError(
                f"Failed to reach {locator}: {error!r}. "
                "Check network connectivity and retry."
            ) from error
        if not response.is_success:
            raise RemoteFetchError(locator, response.status_code)
        return response.content


def decode_dataset(locator: str, body: bytes) -> Dataset:
    """Decode a response body into typed dataset records.

    Args:
        locator: Source URL, used for error context.
        body: Raw response body.

    Returns:
        Ordered tuple of records.

    Raises:
        MalformedPayloadError: If the body is not a JSON array of objects.
    """
    try:
        payload: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as error:
        raise MalformedPayloadError(
            f"Failed to parse dataset from {locator}: {error}. "
            "The source must serve a JSON document."
        ) from error
    if not isinstance(payload, list):
        raise MalformedPayloadError(
            f"Invalid dataset from {locator}: expected JSON array at top level, "
            f"got {type(payload).__name__}."
        )
    records: list[DatasetRecord] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedPayloadError(
                f"Invalid dataset from {locator}: item {index} is "
                f"{type(item).__name__}, expected JSON object."
            )
        records.append(DatasetRecord(index=index, fields=item))
    return tuple(records)


def _is_retryable(error: BaseException) -> bool:
    """Return whether a fetch failure is worth another attempt."""
    if isinstance(error, TransportError):
        return True
    return isinstance(error, RemoteFetchError) and error.status_code >= 500
