"""Regra de tamanho do endereço."""

from dataclasses import dataclass

from email_validation.constants import COUNT_TOKEN
from email_validation.types.config import ValidationConfig


@dataclass(frozen=True, slots=True)
class LengthConstraint:
    """
    Restrição de tamanho efetiva de uma configuração.

    exact exclui minimum/maximum; minimum e maximum podem coexistir
    apenas quando vêm de um range ou da política padrão.
    """

    minimum: int | None = None
    maximum: int | None = None
    exact: int | None = None


def resolve_length_constraint(config: ValidationConfig) -> LengthConstraint:
    """Resolve a restrição: exact, minimum, maximum, range ou padrão 3..320."""
    if config.exact is not None:
        return LengthConstraint(exact=config.exact)
    if config.minimum is not None:
        return LengthConstraint(minimum=config.minimum)
    if config.maximum is not None:
        return LengthConstraint(maximum=config.maximum)
    if config.range is not None:
        low, high = config.range
        return LengthConstraint(minimum=low, maximum=high)
    return LengthConstraint(
        minimum=config.default_minimum,
        maximum=config.default_maximum,
    )


def interpolate(message: str, count: int) -> str:
    """Substitui %{count} pelo limite violado."""
    return message.replace(COUNT_TOKEN, str(count))


def check_length(value: str, config: ValidationConfig) -> list[str]:
    """
    Valida o tamanho de value segundo a configuração.

    Returns:
        Lista com no máximo uma mensagem (too_short, too_long ou wrong_length).
    """
    constraint = resolve_length_constraint(config)
    length = len(value)

    if constraint.exact is not None:
        if length != constraint.exact:
            return [interpolate(config.wrong_length, constraint.exact)]
        return []

    if constraint.minimum is not None and length < constraint.minimum:
        return [interpolate(config.too_short, constraint.minimum)]

    if constraint.maximum is not None and length > constraint.maximum:
        return [interpolate(config.too_long, constraint.maximum)]

    return []
