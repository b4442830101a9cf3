"""Taxonomia de erros do conector OneSignal.

Toda falha chega ao chamador como um destes tipos; nada é recuperado
localmente nem substituído por valor padrão.
"""

from __future__ import annotations

from typing import Any


class OneSignalError(RuntimeError):
    """Base para falhas do conector OneSignal."""


class ConfigurationError(OneSignalError, ValueError):
    """Configuração inválida detectada na construção do cliente."""


class ValidationError(OneSignalError):
    """Pré-condição de campo obrigatório violada (antes de qualquer IO)."""


class TransportError(OneSignalError):
    """Endpoint remoto rejeitou a chamada ou a requisição de rede falhou.

    Attributes:
        status_code: Status HTTP do upstream, quando houve resposta.
        details: Corpo de erro do upstream (ex.: membro ``errors``) ou
            mensagem da camada de transporte.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class UnknownError(OneSignalError):
    """Falha não classificável; carrega a forma serializada da causa."""

    def __init__(self, message: str, cause: str) -> None:
        super().__init__(message)
        self.cause = cause
