"""Cliente HTTP base para conectores da camada API.

Uma tentativa por chamada: não há retry, backoff nem cache.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from api.connectors.onesignal.models import HttpMethod

if TYPE_CHECKING:
    from api.connectors.onesignal.models import RequestEnvelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP.

    Timeout e headers vêm de cada RequestEnvelope.
    """

    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Sem httpx.AsyncClient injetado, abre um cliente por chamada. Com cliente
    injetado, o pool de conexões é compartilhado entre chamadas concorrentes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def send(self, envelope: RequestEnvelope) -> httpx.Response:
        """Despacha o envelope e retorna a resposta 2xx.

        Raises:
            httpx.HTTPStatusError: Se o upstream respondeu com status de erro
            httpx.HTTPError: Se a chamada de rede falhou (timeout, conexão)
        """
        headers = dict(envelope.headers)
        if self._client is not None:
            return await _dispatch(self._client, envelope, headers)
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await _dispatch(client, envelope, headers)

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient injetado, se houver."""
        if self._client is not None:
            await self._client.aclose()


async def _dispatch(
    client: httpx.AsyncClient,
    envelope: RequestEnvelope,
    headers: dict[str, str],
) -> httpx.Response:
    url = envelope.url
    timeout = envelope.timeout_seconds
    method = envelope.method

    if method is HttpMethod.GET:
        response = await client.get(url, headers=headers, timeout=timeout)
    elif method is HttpMethod.DELETE:
        response = await client.delete(url, headers=headers, timeout=timeout)
    elif method is HttpMethod.POST:
        response = await client.post(url, json=envelope.body, headers=headers, timeout=timeout)
    elif method is HttpMethod.PUT:
        response = await client.put(url, json=envelope.body, headers=headers, timeout=timeout)
    else:
        response = await client.patch(url, json=envelope.body, headers=headers, timeout=timeout)

    response.raise_for_status()
    return response
