"""Tipos da validação de email."""

from email_validation.types.config import Predicate, ValidationConfig
from email_validation.types.result import ValidationResult

__all__ = [
    "Predicate",
    "ValidationConfig",
    "ValidationResult",
]
