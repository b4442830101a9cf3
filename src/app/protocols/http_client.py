"""Protocolo HTTP usado pelos serviços de recurso.

Evita dependência direta da camada api: os serviços só conhecem este
contrato estreito, e os testes usam um mock no lugar do gateway.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class OneSignalGatewayProtocol(Protocol):
    """Contrato mínimo do gateway de transporte OneSignal."""

    @property
    def app_id(self) -> str: ...

    async def execute(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, str | None] | None = None,
    ) -> Any: ...
