"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConflictingLengthOptionsError,
    EmailValidationError,
    InvalidConfigurationError,
)

__all__ = [
    "ConflictingLengthOptionsError",
    "EmailValidationError",
    "InvalidConfigurationError",
]
