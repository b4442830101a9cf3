"""Factories de clientes externos: OneSignal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.onesignal import OneSignalClient

if TYPE_CHECKING:
    import httpx

    from config.settings import OneSignalSettings

logger = logging.getLogger(__name__)


def create_onesignal_client(
    settings: OneSignalSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> OneSignalClient:
    """Cria a fachada OneSignal.

    Args:
        settings: OneSignalSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient compartilhado (opcional)

    Raises:
        ConfigurationError: Se app_id/api_key ausentes no ambiente
    """
    from config.settings import get_onesignal_settings

    resolved = settings or get_onesignal_settings()
    logger.info(
        "onesignal_client_created",
        extra={
            "component": "bootstrap",
            "api_base_url": resolved.api_base_url,
            "timeout_ms": resolved.request_timeout_ms,
            "shared_http_client": http_client is not None,
        },
    )
    return OneSignalClient.from_settings(resolved, http_client)
