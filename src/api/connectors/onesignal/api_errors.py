"""Erros e helpers de parsing para respostas de erro do OneSignal."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

API_ERROR_PREFIX = "OneSignal API error"


@dataclass(frozen=True)
class OneSignalApiError:
    """Erro retornado pela REST API do OneSignal."""

    status_code: int
    details: Any
    is_permanent: bool  # True se repetir a mesma chamada não adianta

    @property
    def message(self) -> str:
        return f"{API_ERROR_PREFIX}: {serialize_details(self.details)}"


def is_permanent_status(status_code: int) -> bool:
    """Classifica status como permanente ou transitório.

    Transitórios: 408, 429 (rate limit), 5xx. Demais 4xx são permanentes.
    """
    if status_code in (408, 429) or status_code >= 500:
        return False
    return status_code >= 400


def serialize_details(details: Any) -> str:
    """Serializa detalhes de erro em JSON (fallback para str)."""
    try:
        return json.dumps(details, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(details)


def parse_api_error(response: httpx.Response) -> OneSignalApiError:
    """Extrai informações de erro de uma resposta não-2xx.

    Prioriza o membro ``errors`` do corpo; sem ele usa o corpo JSON inteiro;
    sem JSON usa o texto bruto (ou o reason phrase, se vazio).

    Args:
        response: Resposta HTTP com status de erro

    Returns:
        OneSignalApiError com status e detalhes
    """
    details: Any
    try:
        body = response.json()
    except ValueError:
        details = response.text or response.reason_phrase
    else:
        if isinstance(body, dict) and "errors" in body:
            details = body["errors"]
        else:
            details = body

    return OneSignalApiError(
        status_code=response.status_code,
        details=details,
        is_permanent=is_permanent_status(response.status_code),
    )
