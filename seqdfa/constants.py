"""Shared constants and helpers for seqdfa.

Centralizes matcher defaults, the environment variable names that
override them, and timezone-aware datetime helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)

# Lines of surrounding context captured before and after each match.
DEFAULT_CONTEXT_LINES: int = 2

# Maximum content size scanned per file (1 MB). Longer content is truncated.
MAX_CONTENT_SIZE: int = 1_048_576

# Matches reported per file before the matcher stops scanning.
MAX_MATCHES: int = 10_000

# Environment overrides read by MatcherConfig.from_env()
ENV_CONTEXT_LINES = "SEQDFA_CONTEXT_LINES"
ENV_MAX_CONTENT_SIZE = "SEQDFA_MAX_CONTENT_SIZE"
ENV_MAX_MATCHES = "SEQDFA_MAX_MATCHES"
ENV_IGNORE_CASE = "SEQDFA_IGNORE_CASE"
