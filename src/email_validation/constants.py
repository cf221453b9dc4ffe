"""Limites e mensagens padrão da validação de email.

Limites práticos do RFC5321: 3 caracteres (a@b) até 320
(64 de local-part + @ + 255 de domínio).
"""

DEFAULT_MINIMUM_LENGTH = 3
DEFAULT_MAXIMUM_LENGTH = 320

# Token substituído pelo limite violado
COUNT_TOKEN = "%{count}"

DEFAULT_WRONG_FORMAT_MESSAGE = "is invalid"
DEFAULT_TOO_SHORT_MESSAGE = f"is too short (minimum is {COUNT_TOKEN} characters)"
DEFAULT_TOO_LONG_MESSAGE = f"is too long (maximum is {COUNT_TOKEN} characters)"
DEFAULT_WRONG_LENGTH_MESSAGE = f"is the wrong length (should be {COUNT_TOKEN} characters)"

# Opções declarativas que definem restrição de tamanho (mutuamente exclusivas)
LENGTH_OPTIONS = ("minimum", "maximum", "exact", "range")
