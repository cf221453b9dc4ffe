"""
Validação de endereços de email (formato RFC822/RFC1035 + tamanho).

Estrutura:
    - patterns/: Gramáticas RFC822 e RFC1035 (regex compiladas)
    - types/: ValidationConfig e ValidationResult
    - rules/: Regras de formato, tamanho e condições :if/:unless
    - validator/: EmailValidator e a função pura validate()
    - registry/: ValidationRegistry e ValidationErrors

Uso:
    from email_validation import ValidationConfig, validate

    config = ValidationConfig.from_options({"is": 8})
    validate("a@aa.com", config)  # []
"""

from email_validation.constants import (
    DEFAULT_MAXIMUM_LENGTH,
    DEFAULT_MINIMUM_LENGTH,
    DEFAULT_TOO_LONG_MESSAGE,
    DEFAULT_TOO_SHORT_MESSAGE,
    DEFAULT_WRONG_FORMAT_MESSAGE,
    DEFAULT_WRONG_LENGTH_MESSAGE,
)
from email_validation.patterns import (
    STRICT_EMAIL_ADDRESS,
    UNRESTRICTED_EMAIL_ADDRESS,
)
from email_validation.registry import ValidationErrors, ValidationRegistry
from email_validation.rules import (
    ConditionResult,
    LengthConstraint,
    evaluate_conditions,
    matches_format,
)
from email_validation.types import ValidationConfig, ValidationResult
from email_validation.validator import EmailValidator, validate

__all__ = [
    "DEFAULT_MAXIMUM_LENGTH",
    "DEFAULT_MINIMUM_LENGTH",
    "DEFAULT_TOO_LONG_MESSAGE",
    "DEFAULT_TOO_SHORT_MESSAGE",
    "DEFAULT_WRONG_FORMAT_MESSAGE",
    "DEFAULT_WRONG_LENGTH_MESSAGE",
    "STRICT_EMAIL_ADDRESS",
    "UNRESTRICTED_EMAIL_ADDRESS",
    "ConditionResult",
    "EmailValidator",
    "LengthConstraint",
    "ValidationConfig",
    "ValidationErrors",
    "ValidationRegistry",
    "ValidationResult",
    "evaluate_conditions",
    "matches_format",
    "validate",
]
