"""Logging setup for seqdfa.

STDOUT carries command output only (search results, tables, JSON), so the
CLI routes every log record to STDERR. Library code logs through the
shared loguru ``logger`` and never configures sinks itself.

Environment:
- DEBUG=true: lower the CLI sink level to DEBUG
"""

import os
import sys

from loguru import logger as loguru_logger


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("DEBUG", "").lower() == "true"


def _stderr_sink(message: str) -> None:
    # sys.stderr is looked up per write; CliRunner swaps it on every invoke
    sys.stderr.write(message)


def configure_logging(debug: bool | None = None) -> int:
    """
    Replace loguru's default sink with a single STDERR sink.

    Args:
        debug: Force debug level on or off. None falls back to the
            DEBUG environment variable.

    Returns:
        The id of the installed sink.
    """
    if debug is None:
        debug = is_debug_enabled()

    loguru_logger.remove()
    return loguru_logger.add(
        _stderr_sink,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
    )


# Export loguru logger for direct use
logger = loguru_logger
