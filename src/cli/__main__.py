"""Module entry point for ``python -m cli``; runs the importer CLI."""

from __future__ import annotations

from cli.main import run


if __name__ == "__main__":
    raise SystemExit(run())
