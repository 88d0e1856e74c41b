"""Runtime configuration model for the importer.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_COLLISION_POLICY,
    DEFAULT_FETCH_ATTEMPTS,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_TRANSFORM_NAME,
    DEFAULT_VAULT_ROOT,
    SUPPORTED_COLLISION_POLICIES,
)
from core.errors import ImporterConfigError


@dataclass(frozen=True)
class ImporterConfig:
    """Validated runtime configuration.

    Attributes:
        vault_root: Root directory of the storage tree receiving documents.
        fetch_timeout_seconds: Per-request network timeout.
        fetch_attempts: Maximum network attempts per fetch, 1 disables retry.
        collision_policy: Handling of documents that already exist.
        transform_name: Name of the record transform used for content.
    """

    vault_root: Path
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    fetch_attempts: int = DEFAULT_FETCH_ATTEMPTS
    collision_policy: str = DEFAULT_COLLISION_POLICY
    transform_name: str = DEFAULT_TRANSFORM_NAME

    @classmethod
    def from_env(cls) -> "ImporterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ImporterConfigError: If environment values are invalid.
        """
        vault_root_value = os.getenv("IMPORTER_VAULT_ROOT", str(DEFAULT_VAULT_ROOT))
        timeout_value = os.getenv("IMPORTER_FETCH_TIMEOUT", str(DEFAULT_FETCH_TIMEOUT_SECONDS))
        attempts_value = os.getenv("IMPORTER_FETCH_ATTEMPTS", str(DEFAULT_FETCH_ATTEMPTS))
        collision_value = os.getenv("IMPORTER_COLLISION_POLICY", DEFAULT_COLLISION_POLICY)
        transform_value = os.getenv("IMPORTER_TRANSFORM", DEFAULT_TRANSFORM_NAME)
        return cls(
            vault_root=Path(vault_root_value).expanduser().resolve(),
            fetch_timeout_seconds=_parse_timeout(timeout_value),
            fetch_attempts=_parse_attempts(attempts_value),
            collision_policy=_parse_collision_policy(collision_value),
            transform_name=transform_value.strip(),
        )


def _parse_timeout(raw_value: str) -> float:
    """Parse the fetch timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        ImporterConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise ImporterConfigError(
            "Invalid IMPORTER_FETCH_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set IMPORTER_FETCH_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise ImporterConfigError(
            f"Invalid IMPORTER_FETCH_TIMEOUT value: {timeout} must be greater than zero."
        )
    return timeout


def _parse_attempts(raw_value: str) -> int:
    """Parse the fetch attempts environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Attempt count of at least one.

    Raises:
        ImporterConfigError: If value is not a positive integer.
    """
    try:
        attempts = int(raw_value)
    except ValueError as error:
        raise ImporterConfigError(
            "Invalid IMPORTER_FETCH_ATTEMPTS value: "
            f"expected integer, got '{raw_value}'. "
            "Set IMPORTER_FETCH_ATTEMPTS to 1 or more."
        ) from error
    if attempts < 1:
        raise ImporterConfigError(
            f"Invalid IMPORTER_FETCH_ATTEMPTS value: {attempts} must be at least 1."
        )
    return attempts


def _parse_collision_policy(raw_value: str) -> str:
    """Validate the collision policy environment value."""
    policy = raw_value.strip().lower()
    if policy not in SUPPORTED_COLLISION_POLICIES:
        raise ImporterConfigError(
            f"Invalid IMPORTER_COLLISION_POLICY value '{raw_value}'. "
            f"Supported policies: {', '.join(SUPPORTED_COLLISION_POLICIES)}."
        )
    return policy
