"""Envelope de requisição montado pelo gateway a cada chamada."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from api.connectors.onesignal.endpoints import encode_query


class HttpMethod(StrEnum):
    """Verbos HTTP aceitos pela REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def takes_body(self) -> bool:
        """GET e DELETE não carregam corpo."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True, slots=True)
class RequestEnvelope:
    """Requisição completa pronta para despacho.

    Criada por chamada e descartada em seguida; nunca compartilhada.

    Atributos:
        method: Verbo HTTP
        base_url: URL base da API (sem barra final)
        path: Caminho do endpoint, podendo já conter query (ex: ?c=push)
        query: Pares chave/valor adicionais, em ordem de inserção
        body: Payload JSON (apenas POST/PUT/PATCH)
        headers: Content-Type e Authorization
        timeout_seconds: Timeout da chamada
    """

    method: HttpMethod
    base_url: str
    path: str
    query: tuple[tuple[str, str], ...] = ()
    body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout_seconds: float = 10.0

    @property
    def endpoint(self) -> str:
        """Caminho sem query string, usado em logs e métricas."""
        return self.path.split("?", 1)[0]

    @property
    def url(self) -> str:
        """URL absoluta com a query string em ordem de inserção."""
        url = f"{self.base_url}{self.path}"
        if not self.query:
            return url
        separator = "&" if "?" in self.path else "?"
        return f"{url}{separator}{encode_query(self.query)}"
