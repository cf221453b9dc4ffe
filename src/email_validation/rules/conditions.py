"""
Condições (:if / :unless) que decidem se a validação roda.

Segue o mesmo desenho dos guards: cada condição devolve um
ConditionResult e a primeira que negar interrompe a avaliação.
"""

from typing import Any

from email_validation.records import read_field
from email_validation.types.config import Predicate, ValidationConfig


class ConditionResult:
    """
    Resultado da avaliação das condições.

    Attributes:
        allowed: Se a validação deve rodar
        reason: Motivo do salto (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "ConditionResult":
        """Cria resultado permitindo a validação."""
        return cls(allowed=True)

    @classmethod
    def skip(cls, reason: str) -> "ConditionResult":
        """Cria resultado pulando a validação."""
        return cls(allowed=False, reason=reason)


def call_predicate(predicate: Predicate, record: Any) -> bool:
    """
    Avalia um predicado contra o registro.

    Strings são resolvidas como chave (mappings) ou atributo do
    registro; se o valor for chamável, é invocado sem argumentos.
    """
    if isinstance(predicate, str):
        value = read_field(record, predicate)
        return bool(value() if callable(value) else value)
    return bool(predicate(record))


def condition_if(config: ValidationConfig, record: Any) -> ConditionResult:
    """Condição :if, pula quando o predicado é falso."""
    if config.if_ is not None and not call_predicate(config.if_, record):
        return ConditionResult.skip("if_false")
    return ConditionResult.allow()


def condition_unless(config: ValidationConfig, record: Any) -> ConditionResult:
    """Condição :unless, pula quando o predicado é verdadeiro."""
    if config.unless is not None and call_predicate(config.unless, record):
        return ConditionResult.skip("unless_true")
    return ConditionResult.allow()


DEFAULT_CONDITIONS = [
    condition_if,
    condition_unless,
]


def evaluate_conditions(
    config: ValidationConfig,
    record: Any = None,
    conditions: list | None = None,
) -> ConditionResult:
    """
    Avalia as condições de execução da validação.

    Args:
        config: Configuração com os predicados
        record: Registro passado aos predicados
        conditions: Condições a aplicar (usa DEFAULT_CONDITIONS se None)

    Returns:
        ConditionResult da primeira condição que pular, ou allow()
    """
    conditions_to_apply = conditions if conditions is not None else DEFAULT_CONDITIONS

    for condition in conditions_to_apply:
        result = condition(config, record)
        if not result.allowed:
            return result

    return ConditionResult.allow()
