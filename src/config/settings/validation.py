"""Settings da validação de email.

Defaults aplicados pelo registry quando as opções declarativas não
informam modo ou limites de tamanho.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ValidationSettings:
    """Configurações padrão da validação de email.

    Attributes:
        strict: Aplica regras RFC1035 ao domínio por padrão
        minimum_length: Limite inferior da política padrão de tamanho
        maximum_length: Limite superior da política padrão de tamanho
    """

    strict: bool = True
    minimum_length: int = 3
    maximum_length: int = 320

    def validate(self) -> list[str]:
        """Valida configurações de validação.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.minimum_length < 0:
            errors.append("EMAIL_VALIDATION_MIN_LENGTH deve ser >= 0")

        if self.maximum_length < self.minimum_length:
            errors.append(
                "EMAIL_VALIDATION_MAX_LENGTH deve ser >= EMAIL_VALIDATION_MIN_LENGTH"
            )

        return errors


def _load_validation_from_env() -> ValidationSettings:
    """Carrega ValidationSettings de variáveis de ambiente."""
    return ValidationSettings(
        strict=os.getenv("EMAIL_VALIDATION_STRICT", "true").lower() in ("true", "1"),
        minimum_length=int(os.getenv("EMAIL_VALIDATION_MIN_LENGTH", "3")),
        maximum_length=int(os.getenv("EMAIL_VALIDATION_MAX_LENGTH", "320")),
    )


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """Retorna instância cacheada de ValidationSettings."""
    return _load_validation_from_env()
