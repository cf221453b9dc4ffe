"""Bootstrap da validação: logging e checagem de settings.

Uso:
    from email_validation.bootstrap import initialize_validation

    # Uma vez, na inicialização do processo hospedeiro
    initialize_validation()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import configure_logging
from config.settings import get_base_settings, get_validation_settings

if TYPE_CHECKING:
    from collections.abc import Callable

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_validation(
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging a partir das settings e valida a configuração."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=base.service_name,
        correlation_id_getter=correlation_id_getter,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas
    registra alerta.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"validation: {error}" for error in get_validation_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
