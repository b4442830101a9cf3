"""Gateway de transporte para a REST API do OneSignal.

Único ponto de IO de rede do conector. Responsabilidades:
- Montar o envelope (headers de autenticação, timeout, URL com query)
- Despachar exatamente uma tentativa por chamada
- Classificar falhas em TransportError / UnknownError
- Logging estruturado sem api_key nem conteúdo das mensagens

Não guarda estado mutável por chamada: a configuração é somente leitura,
então uma instância pode ser usada por chamadas concorrentes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.onesignal.api_errors import parse_api_error
from api.connectors.onesignal.api_logging import (
    log_api_error,
    log_success,
    log_transport_error,
    log_unexpected_error,
)
from api.connectors.onesignal.http_base import HttpClient
from api.connectors.onesignal.models import HttpMethod, RequestEnvelope
from app.observability import get_correlation_id, record_latency
from utils.errors import OneSignalError, TransportError, UnknownError, ValidationError

if TYPE_CHECKING:
    from config.settings import OneSignalSettings

logger: logging.Logger = logging.getLogger(__name__)

_COMPONENT = "onesignal_gateway"


class OneSignalHttpClient(HttpClient):
    """Cliente HTTP especializado para a REST API do OneSignal.

    Tratamento específico:
    - Authorization: Basic <api_key> em toda chamada
    - Status de erro: TransportError com status e membro ``errors`` do upstream
    - Falha de rede/timeout: TransportError sem status
    - Qualquer outra exceção: UnknownError com a causa serializada
    """

    def __init__(
        self,
        settings: OneSignalSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o gateway.

        Args:
            settings: Configuração validada (app_id, api_key, timeout)
            client: httpx.AsyncClient compartilhado (opcional)
        """
        super().__init__(client=client)
        self._settings = settings
        self._headers: Mapping[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Basic {settings.api_key}",
        }

    @property
    def app_id(self) -> str:
        """app_id configurado, injetado pelos serviços de recurso."""
        return self._settings.app_id

    def build_envelope(
        self,
        method: HttpMethod | str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str | None] | None = None,
    ) -> RequestEnvelope:
        """Monta o envelope de uma chamada.

        Args:
            method: Verbo HTTP
            path: Caminho relativo à URL base (pode conter query)
            body: Payload JSON (apenas POST/PUT/PATCH)
            params: Query adicional; valores None são omitidos

        Raises:
            ValidationError: Verbo desconhecido ou corpo em GET/DELETE
        """
        try:
            http_method = HttpMethod(str(method).upper())
        except ValueError as exc:
            raise ValidationError(f"unsupported HTTP method: {method}") from exc

        if body is not None and not http_method.takes_body:
            raise ValidationError(f"{http_method} requests do not take a body")

        query = tuple(
            (key, str(value)) for key, value in (params or {}).items() if value is not None
        )
        return RequestEnvelope(
            method=http_method,
            base_url=self._settings.api_base_url,
            path=path,
            query=query,
            body=dict(body) if body is not None else None,
            headers=dict(self._headers),
            timeout_seconds=self._settings.request_timeout_seconds,
        )

    async def execute(
        self,
        method: HttpMethod | str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str | None] | None = None,
    ) -> Any:
        """Executa uma chamada e retorna o corpo JSON sem alterações.

        Returns:
            Corpo da resposta decodificado (None se vazio, ex: 204)

        Raises:
            ValidationError: Envelope inválido (antes de qualquer IO)
            TransportError: Upstream rejeitou ou a rede falhou
            UnknownError: Qualquer outra falha
        """
        envelope = self.build_envelope(method, path, body, params)
        operation = f"{envelope.method} {envelope.endpoint}"
        outcome = "success"
        started = time.perf_counter()
        try:
            response = await self.send(envelope)
            return self._process_response(response, envelope)
        except OneSignalError as exc:
            outcome = type(exc).__name__
            raise
        except httpx.HTTPStatusError as exc:
            outcome = TransportError.__name__
            raise self._status_error(exc, envelope) from exc
        except httpx.HTTPError as exc:
            outcome = TransportError.__name__
            raise self._network_error(exc, envelope) from exc
        except Exception as exc:
            outcome = UnknownError.__name__
            raise self._unknown_error(exc, envelope) from exc
        finally:
            record_latency(
                _COMPONENT,
                operation,
                (time.perf_counter() - started) * 1000,
                get_correlation_id(),
                outcome=outcome,
            )

    def _process_response(
        self,
        response: httpx.Response,
        envelope: RequestEnvelope,
    ) -> Any:
        """Decodifica o corpo de uma resposta 2xx.

        Corpo vazio vira None; corpo que não é JSON volta como texto.
        """
        log_success(envelope.method, envelope.endpoint, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug(
                "onesignal_non_json_body",
                extra={"endpoint": envelope.endpoint, "status_code": response.status_code},
            )
            return response.text

    def _status_error(
        self,
        exc: httpx.HTTPStatusError,
        envelope: RequestEnvelope,
    ) -> TransportError:
        api_error = parse_api_error(exc.response)
        log_api_error(api_error, envelope.method, envelope.endpoint)
        return TransportError(
            api_error.message,
            status_code=api_error.status_code,
            details=api_error.details,
        )

    def _network_error(
        self,
        exc: httpx.HTTPError,
        envelope: RequestEnvelope,
    ) -> TransportError:
        # Timeouts do httpx costumam vir com mensagem vazia
        reason = str(exc) or type(exc).__name__
        log_transport_error(envelope.method, envelope.endpoint, type(exc).__name__)
        return TransportError(f"OneSignal request failed: {reason}", details=reason)

    def _unknown_error(
        self,
        exc: Exception,
        envelope: RequestEnvelope,
    ) -> UnknownError:
        log_unexpected_error(envelope.method, envelope.endpoint)
        cause = f"{type(exc).__name__}: {exc!r}"
        return UnknownError(f"OneSignal unknown error: {cause}", cause=cause)

    async def __aenter__(self) -> OneSignalHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_onesignal_http_client(
    settings: OneSignalSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> OneSignalHttpClient:
    """Factory para criar o gateway com config padrão.

    Args:
        settings: OneSignalSettings opcional. Se None, carrega do ambiente.
        client: httpx.AsyncClient compartilhado (opcional)
    """
    # Import local para evitar dependência circular
    from config.settings import get_onesignal_settings

    return OneSignalHttpClient(settings or get_onesignal_settings(), client)
