"""Validador de email."""

from email_validation.validator.address import EmailValidator, validate

__all__ = [
    "EmailValidator",
    "validate",
]
