"""Helpers de logging para a REST API do OneSignal (sem api_key nem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id

if TYPE_CHECKING:
    from .api_errors import OneSignalApiError

logger = logging.getLogger(__name__)


def log_api_error(
    api_error: OneSignalApiError,
    method: str,
    endpoint: str,
) -> None:
    """Loga rejeição do upstream.

    Os detalhes vêm do próprio OneSignal (mensagens de validação) e não
    incluem o payload enviado.
    """
    logger.warning(
        "onesignal_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": api_error.status_code,
            "is_permanent": api_error.is_permanent,
            "error_details": api_error.details,
            "correlation_id": get_correlation_id(),
        },
    )


def log_transport_error(
    method: str,
    endpoint: str,
    error_type: str,
) -> None:
    """Loga falha de rede (timeout, conexão recusada, DNS)."""
    logger.warning(
        "onesignal_transport_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "error_type": error_type,
            "correlation_id": get_correlation_id(),
        },
    )


def log_unexpected_error(method: str, endpoint: str) -> None:
    """Loga falha não classificável com traceback."""
    logger.exception(
        "onesignal_unexpected_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "correlation_id": get_correlation_id(),
        },
    )


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    logger.debug(
        "onesignal_request_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "correlation_id": get_correlation_id(),
        },
    )
