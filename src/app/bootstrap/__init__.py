"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta o gateway HTTP aos serviços de recurso.

Uso:
    from app.bootstrap import create_onesignal_client, initialize_app

    # Na inicialização do processo
    initialize_app()

    async with create_onesignal_client() as client:
        await client.view_app()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.clients import create_onesignal_client
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_onesignal_settings

# Nome do serviço para logs e métricas
SERVICE_NAME = "onesignal_connector"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings do OneSignal no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.

    Raises:
        ConfigurationError: app_id/api_key ausentes (em qualquer ambiente)
        RuntimeError: Settings inconsistentes em modo estrito
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = [f"onesignal: {error}" for error in get_onesignal_settings().validate()]

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_onesignal_client",
    "initialize_app",
    "validate_runtime_settings",
]
