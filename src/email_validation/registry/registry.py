"""
Registro explícito de validações de email por campo.

Substitui a cadeia de callbacks por classe do framework hospedeiro:
cada instância de ValidationRegistry guarda seus pares
(campo, ValidationConfig) e valida registros sob demanda. Não há
estado global; testes criam um registry novo por caso.

Uso:
    registry = ValidationRegistry()
    registry.validates_as_email_address("email", minimum=8)

    errors = registry.validate(user)
    errors.on("email")  # ["is too short (minimum is 8 characters)"]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from config.logging import get_logger
from config.settings import ValidationSettings, get_validation_settings
from email_validation.records import read_field
from email_validation.registry.errors import ValidationErrors
from email_validation.types.config import ValidationConfig
from email_validation.validator.address import EmailValidator
from utils.errors import InvalidConfigurationError

logger = get_logger(__name__)


class ValidationRegistry:
    """
    Validações de email registradas por campo.

    Attributes:
        settings: Defaults aplicados às opções declarativas
    """

    __slots__ = ("_rules", "_settings")

    def __init__(self, settings: ValidationSettings | None = None) -> None:
        self._settings = settings or get_validation_settings()
        self._rules: list[tuple[str, EmailValidator]] = []

    @property
    def settings(self) -> ValidationSettings:
        return self._settings

    @property
    def fields(self) -> list[str]:
        """Campos com validação registrada, sem repetição, em ordem."""
        return list(dict.fromkeys(field for field, _ in self._rules))

    def build_config(self, options: Mapping[str, Any]) -> ValidationConfig:
        """Aplica os defaults das settings e cria a configuração."""
        values = dict(options)
        values.setdefault("strict", self._settings.strict)
        values.setdefault("default_minimum", self._settings.minimum_length)
        values.setdefault("default_maximum", self._settings.maximum_length)
        return ValidationConfig.from_options(values)

    def register(self, field: str, config: ValidationConfig) -> None:
        """Registra uma configuração já construída para o campo."""
        if not field:
            raise InvalidConfigurationError("Nome de campo não pode ser vazio")
        self._rules.append((field, EmailValidator(config)))
        logger.debug(
            "Email validation registered",
            extra={
                "field": field,
                "strict": config.strict,
                "length_option": config.length_option,
            },
        )

    def validates_as_email_address(
        self,
        *fields: str,
        **options: Any,
    ) -> ValidationConfig:
        """
        Registra validação de email para um ou mais campos.

        Palavras reservadas (`is`, `in`, `if`) podem ser passadas via
        `**{"is": 8}` ou pelos nomes alternativos exact/within/if_.

        Returns:
            A configuração compartilhada pelos campos.

        Raises:
            InvalidConfigurationError: Nenhum campo, opção desconhecida
                ou restrições de tamanho conflitantes.
        """
        if not fields:
            raise InvalidConfigurationError("Informe ao menos um campo")

        config = self.build_config(options)
        for field in fields:
            self.register(field, config)
        return config

    def validate(self, record: Any) -> ValidationErrors:
        """Valida o registro e agrupa as mensagens por campo."""
        errors = ValidationErrors()
        for field, validator in self._rules:
            value = read_field(record, field)
            errors.merge(validator.check(field, value, record))
        return errors

    def is_valid(self, record: Any) -> bool:
        return self.validate(record).is_empty

    def clear(self) -> None:
        """Remove todas as validações registradas."""
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)
