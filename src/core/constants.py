"""Core constants used across importer modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_VAULT_ROOT = Path("vault")
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
DEFAULT_FETCH_ATTEMPTS = 1
DEFAULT_COLLISION_POLICY = "skip"
SUPPORTED_COLLISION_POLICIES = ("skip", "overwrite", "error")
DEFAULT_TRANSFORM_NAME = "markdown"
PLACEHOLDER_DOCUMENT_CONTENT = "test"
DOCUMENT_FILE_EXTENSION = ".md"
RECORD_NAME_FIELD = "name"
RECORD_DESCRIPTION_FIELD = "desc"
INVALID_NAME_CHARACTERS = frozenset('\\/:*?"<>|')
RETRY_BACKOFF_INITIAL_SECONDS = 0.2
RETRY_BACKOFF_MAX_SECONDS = 2.0
USER_AGENT = "srd-vault-importer/0.1"
SRD_DATABASE_BASE_URL = "https://raw.githubusercontent.com/5e-bits/5e-database/main/src"
SETTINGS_DIR_NAME = ".srd-importer"
SETTINGS_FILE_NAME = "data.json"
DEFAULT_MY_SETTING = "default"
