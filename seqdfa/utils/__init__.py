"""
seqdfa utility modules.

- Logging (STDERR-only for the CLI)
"""

from .logger import configure_logging, is_debug_enabled, logger

__all__ = [
    "configure_logging",
    "is_debug_enabled",
    "logger",
]
