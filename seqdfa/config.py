"""
Matcher configuration.

Defaults come from seqdfa.constants and can be overridden through the
SEQDFA_* environment variables via MatcherConfig.from_env().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from seqdfa.constants import (
    DEFAULT_CONTEXT_LINES,
    ENV_CONTEXT_LINES,
    ENV_IGNORE_CASE,
    ENV_MAX_CONTENT_SIZE,
    ENV_MAX_MATCHES,
    MAX_CONTENT_SIZE,
    MAX_MATCHES,
)
from seqdfa.types.errors import ConfigurationError, ErrorContext, RecoveryAction, ValidationError


def validate_positive_integer(
    value: int,
    name: str,
    allow_zero: bool = False,
) -> None:
    """
    Validate that a value is a positive integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages
        allow_zero: Whether zero is allowed

    Raises:
        ValidationError: If value is invalid
    """
    if allow_zero:
        if value < 0:
            raise ValidationError(f"{name} must be non-negative", f"{name} must be non-negative.")
    else:
        if value <= 0:
            raise ValidationError(f"{name} must be positive", f"{name} must be positive.")


@dataclass(frozen=True)
class MatcherConfig:
    """Settings shared by every DFAPatternMatcher scan."""

    context_lines: int = DEFAULT_CONTEXT_LINES
    max_content_size: int = MAX_CONTENT_SIZE
    max_matches: int = MAX_MATCHES
    ignore_case: bool = False

    def __post_init__(self) -> None:
        validate_positive_integer(self.context_lines, "context_lines", allow_zero=True)
        validate_positive_integer(self.max_content_size, "max_content_size")
        validate_positive_integer(self.max_matches, "max_matches")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MatcherConfig:
        """Build a config from SEQDFA_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            MatcherConfig with overrides applied over the defaults.

        Raises:
            ConfigurationError: If an integer variable cannot be parsed.
            ValidationError: If a parsed value is out of range.
        """
        env = os.environ if environ is None else environ
        return cls(
            context_lines=_env_int(env, ENV_CONTEXT_LINES, DEFAULT_CONTEXT_LINES),
            max_content_size=_env_int(env, ENV_MAX_CONTENT_SIZE, MAX_CONTENT_SIZE),
            max_matches=_env_int(env, ENV_MAX_MATCHES, MAX_MATCHES),
            ignore_case=env.get(ENV_IGNORE_CASE, "").lower() in ("1", "true", "yes"),
        )


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name}={raw!r} is not an integer",
            user_message=f"Environment variable {name} must be an integer.",
            context=ErrorContext(operation="load_config", additional_info={name: raw}),
            recovery_actions=[RecoveryAction(description=f"Unset {name} or set it to a whole number")],
            original_error=e,
        ) from e
