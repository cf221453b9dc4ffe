"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Níveis configuráveis por ambiente (LOG_LEVEL)

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo que hospeda a validação
    configure_logging(level="INFO", service_name="email_validation")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("Email validation failed", extra={"error_count": 2})

Logs nunca carregam o endereço validado (PII).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "email_validation"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: id da requisição do host).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_validation_skipped(
    logger: logging.Logger,
    field: str | None,
    reason: str,
) -> None:
    """Log observável de validação pulada por condição (sem PII).

    Args:
        logger: Logger instance.
        field: Campo do registro (None quando validado fora do registry).
        reason: Motivo do salto (ex: "if_false", "unless_true", "allow_nil").
    """
    extra: dict[str, object] = {
        "validation_skipped": True,
        "reason": reason,
    }
    if field:
        extra["field"] = field

    logger.debug(
        "Email validation skipped: %s",
        reason,
        extra=extra,
    )
