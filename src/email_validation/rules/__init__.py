"""Regras da validação: formato, tamanho e condições de execução."""

from email_validation.rules.conditions import (
    ConditionResult,
    evaluate_conditions,
)
from email_validation.rules.format import format_violation, matches_format
from email_validation.rules.length import (
    LengthConstraint,
    check_length,
    resolve_length_constraint,
)

__all__ = [
    "ConditionResult",
    "LengthConstraint",
    "check_length",
    "evaluate_conditions",
    "format_violation",
    "matches_format",
    "resolve_length_constraint",
]
