"""Exceções de configuração da validação de email."""

from __future__ import annotations


class EmailValidationError(Exception):
    """Base para erros levantados pelo pacote email_validation."""


class InvalidConfigurationError(EmailValidationError, ValueError):
    """Opções de validação inválidas (chave desconhecida, limite negativo...)."""


class ConflictingLengthOptionsError(InvalidConfigurationError):
    """Mais de uma restrição de tamanho (minimum/maximum/is/within) informada."""
