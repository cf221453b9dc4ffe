"""Configuração do pytest para email_validation."""

import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import ValidationSettings  # noqa: E402
from email_validation.registry import ValidationRegistry  # noqa: E402


@dataclass
class User:
    """Registro mínimo validado nos testes."""

    login: str = "admin"
    email: str | None = "test@example.com"
    backup_email: str | None = None
    confirmed: bool = False


@pytest.fixture
def new_user():
    """Fábrica de usuários com atributos sobrescrevíveis."""

    def _new_user(**attributes) -> User:
        return User(**attributes)

    return _new_user


@pytest.fixture
def registry() -> ValidationRegistry:
    """Registry novo por teste, com settings padrão (independente de env)."""
    return ValidationRegistry(settings=ValidationSettings())
