"""Base comum dos serviços de recurso OneSignal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.http_client import OneSignalGatewayProtocol


class OneSignalResourceService:
    """Serviço sem estado: valida, monta a requisição e delega ao gateway.

    Nenhuma I/O acontece aqui; o gateway é o único ponto de rede.
    """

    __slots__ = ("_gateway",)

    def __init__(self, gateway: OneSignalGatewayProtocol) -> None:
        self._gateway = gateway

    @property
    def app_id(self) -> str:
        return self._gateway.app_id
