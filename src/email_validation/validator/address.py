"""
Validador de endereços de email.

Formato primeiro (RFC822, e RFC1035 no modo estrito), depois tamanho.
As duas regras são independentes: um endereço malformado e curto
demais recebe duas mensagens, com a de formato na frente.
"""

from typing import Any

from config.logging import get_logger, log_validation_skipped
from email_validation.rules.conditions import evaluate_conditions
from email_validation.rules.format import format_violation
from email_validation.rules.length import check_length
from email_validation.types.config import ValidationConfig
from email_validation.types.result import ValidationResult

logger = get_logger(__name__)


def validate(
    value: Any,
    config: ValidationConfig,
    record: Any = None,
    field: str | None = None,
) -> list[str]:
    """
    Valida value segundo config.

    Nunca levanta exceção para o valor: qualquer entrada (inclusive
    vazia) apenas gera mensagens.

    Args:
        value: Endereço a validar (não-strings são convertidas com str())
        config: Configuração da validação
        record: Registro passado aos predicados :if/:unless
        field: Nome do campo, apenas para logs

    Returns:
        Mensagens de erro em ordem (vazia = válido)
    """
    condition = evaluate_conditions(config, record)
    if not condition.allowed:
        log_validation_skipped(logger, field, condition.reason or "condition")
        return []

    if value is None:
        if config.allow_nil:
            log_validation_skipped(logger, field, "allow_nil")
            return []
        value = ""
    elif not isinstance(value, str):
        value = str(value)

    errors: list[str] = []

    violation = format_violation(value, strict=config.strict)
    if violation is not None:
        errors.append(config.wrong_format)

    errors.extend(check_length(value, config))

    if errors:
        logger.debug(
            "Email validation failed",
            extra={
                "field": field,
                "error_count": len(errors),
                "format_violation": violation,
                "strict": config.strict,
                "length_option": config.length_option,
            },
        )
    return errors


class EmailValidator:
    """
    Validador ligado a uma configuração.

    Stateless além da configuração imutável; seguro para uso
    concorrente.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    @classmethod
    def from_options(cls, **options: Any) -> "EmailValidator":
        """Cria validador a partir de opções declarativas."""
        return cls(ValidationConfig.from_options(options))

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def validate(self, value: Any, record: Any = None) -> list[str]:
        """Retorna as mensagens de erro para value."""
        return validate(value, self._config, record)

    def is_valid(self, value: Any, record: Any = None) -> bool:
        return not self.validate(value, record)

    def check(self, field: str, value: Any, record: Any = None) -> ValidationResult:
        """Valida value e empacota o resultado para o campo informado."""
        messages = validate(value, self._config, record, field=field)
        return ValidationResult(field=field, messages=tuple(messages))
