"""Protocolos e contratos do core da aplicação."""

from .http_client import OneSignalGatewayProtocol

__all__ = ["OneSignalGatewayProtocol"]
