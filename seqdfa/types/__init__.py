"""
seqdfa type definitions.
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InputReadError,
    RecoveryAction,
    SeqDFAError,
    ValidationError,
)

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "SeqDFAError",
    "ConfigurationError",
    "ValidationError",
    "InputReadError",
]
