"""Import command wiring for the importer CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from core.errors import ImporterError
from core.types import MaterializationReport
from store.importer_sdk import ImporterClient


def add_import_command(subparsers: Any) -> None:
    """Register import subcommand."""
    parser = subparsers.add_parser("import", help="Import SRD categories into the vault")
    parser.add_argument("categories", nargs="*", help="Category names, e.g. Races Spells")
    parser.add_argument("--all", action="store_true", help="Import every known category")


def run_import_command(client: ImporterClient, args: argparse.Namespace) -> int:
    """Import requested categories and print one notice per category.

    Fatal category errors print one alert line to stderr; the exit code is
    non-zero when any category failed fatally.
    """
    categories = list(client.categories()) if args.all else list(args.categories)
    if not categories:
        print("import_error=no categories given; pass names or --all", file=sys.stderr)
        return 2
    outcomes = client.import_categories(categories)
    exit_code = 0
    for category, outcome in outcomes.items():
        if isinstance(outcome, ImporterError):
            print(f"{category}\terror={outcome}", file=sys.stderr)
            exit_code = 1
            continue
        print(render_notice(outcome))
        print(render_summary(outcome))
    return exit_code


def render_notice(report: MaterializationReport) -> str:
    """Render the one-line host notice for a report."""
    if report.first_record_name is None:
        return f"No {report.category} records with a usable name."
    return f"First {report.category} name: {report.first_record_name}"


def render_summary(report: MaterializationReport) -> str:
    """Render report counts as a tab-separated line."""
    return (
        f"{report.category}\t"
        f"total={report.total}\t"
        f"written={report.written}\t"
        f"skipped={report.skipped}\t"
        f"failed={report.failed}"
    )
