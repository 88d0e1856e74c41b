"""Importer CLI entry points.
This module exposes the user-triggered import action and settings commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from cli.import_command import add_import_command, run_import_command
from cli.settings_command import add_settings_command, run_settings_command
from core.config import ImporterConfig
from core.constants import SUPPORTED_COLLISION_POLICIES
from core.errors import ImporterError
from core.logging_config import configure_cli_logging
from store.importer_sdk import ImporterClient
from transforms.record_markdown import supported_transforms


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="srd-importer",
        description="Import 5e SRD datasets into a Markdown vault",
    )
    parser.add_argument("--vault-root", help="Override IMPORTER_VAULT_ROOT for this command")
    parser.add_argument(
        "--collision-policy",
        choices=SUPPORTED_COLLISION_POLICIES,
        help="Override IMPORTER_COLLISION_POLICY for this command",
    )
    parser.add_argument(
        "--transform",
        choices=supported_transforms(),
        help="Override IMPORTER_TRANSFORM for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_import_command(subparsers)
    _add_categories_command(subparsers)
    add_settings_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the importer CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args)
        if args.command == "import":
            return run_import_command(client, args)
        if args.command == "categories":
            return _run_categories_command(client)
        if args.command == "settings":
            return run_settings_command(client, args)
    except ImporterError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def run() -> int:
    """Console script entry point with stderr logging enabled."""
    configure_cli_logging()
    return main()


def _build_client(args: argparse.Namespace) -> ImporterClient:
    """Build SDK client with optional per-command overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured SDK client.
    """
    config = ImporterConfig.from_env()
    if args.vault_root:
        config = replace(config, vault_root=Path(args.vault_root).expanduser().resolve())
    if args.collision_policy:
        config = replace(config, collision_policy=args.collision_policy)
    if args.transform:
        config = replace(config, transform_name=args.transform)
    return ImporterClient(config)


def _run_categories_command(client: ImporterClient) -> int:
    """Print known categories, one per line."""
    for category in client.categories():
        print(category)
    return 0


def _add_categories_command(subparsers: Any) -> None:
    """Register categories subcommand."""
    subparsers.add_parser("categories", help="List importable categories")
