"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events are rendered by structlog and emitted through stdlib logging,
so handlers decide where they go and stdout stays free for CLI output.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_cli_logging(level: int = logging.INFO) -> None:
    """Send log events to stderr for command-line runs.

    Args:
        level: Minimum stdlib level to emit.
    """
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")
