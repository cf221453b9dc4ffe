"""Agregador de settings.

Re-exporta as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.validation import (
    ValidationSettings,
    get_validation_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "ValidationSettings",
    "get_base_settings",
    "get_validation_settings",
]
