"""Settings command wiring for the importer CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any

from store.importer_sdk import ImporterClient


def add_settings_command(subparsers: Any) -> None:
    """Register settings subcommand."""
    parser = subparsers.add_parser("settings", help="Show or change plugin settings")
    actions = parser.add_subparsers(dest="settings_action", required=True)
    actions.add_parser("show", help="Print current settings")
    set_parser = actions.add_parser("set", help="Save a new value for my_setting")
    set_parser.add_argument("value", help="Free-text setting value")


def run_settings_command(client: ImporterClient, args: argparse.Namespace) -> int:
    """Print or update persisted settings."""
    store = client.settings()
    settings = store.load()
    if args.settings_action == "set":
        settings = replace(settings, my_setting=args.value)
        store.save(settings)
    print(f"my_setting={settings.my_setting}")
    return 0
