"""Registro de validações por campo e coleção de erros."""

from email_validation.records import read_field
from email_validation.registry.errors import ValidationErrors, humanize
from email_validation.registry.registry import ValidationRegistry

__all__ = [
    "ValidationErrors",
    "ValidationRegistry",
    "humanize",
    "read_field",
]
