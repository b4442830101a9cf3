"""Settings específicas do OneSignal.

Contrato de configuração consumido pelo gateway de transporte.
Imutável após a construção, exceto pelo preenchimento do timeout padrão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from utils.errors import ConfigurationError

# Constantes da REST API
ONESIGNAL_API_BASE_URL: str = "https://api.onesignal.com"
DEFAULT_REQUEST_TIMEOUT_MS: int = 10_000


@dataclass(frozen=True)
class OneSignalSettings:
    """Configurações do cliente OneSignal.

    Attributes:
        app_id: Identificador da aplicação no OneSignal
        api_key: REST API key (enviada no header Authorization)
        request_timeout_ms: Timeout por requisição em milissegundos.
            Preenchido com 10000 quando ausente.
        api_base_url: URL base da REST API
    """

    app_id: str
    api_key: str
    request_timeout_ms: int | None = None
    api_base_url: str = ONESIGNAL_API_BASE_URL

    def __post_init__(self) -> None:
        """Valida invariantes e preenche o timeout padrão."""
        if not self.app_id or not self.app_id.strip():
            raise ConfigurationError("OneSignal app_id is required")
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("OneSignal api_key is required")
        if self.request_timeout_ms is None:
            object.__setattr__(self, "request_timeout_ms", DEFAULT_REQUEST_TIMEOUT_MS)
        elif self.request_timeout_ms <= 0:
            raise ConfigurationError("OneSignal request_timeout_ms must be > 0")

    @property
    def request_timeout_seconds(self) -> float:
        """Timeout em segundos, no formato aceito pelo httpx."""
        return (self.request_timeout_ms or DEFAULT_REQUEST_TIMEOUT_MS) / 1000

    def validate(self) -> list[str]:
        """Valida configurações mínimas do OneSignal.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith("https://"):
            errors.append("ONESIGNAL_API_BASE_URL deve usar https")

        if self.api_base_url.endswith("/"):
            errors.append("ONESIGNAL_API_BASE_URL não deve terminar com '/'")

        return errors


def _parse_timeout(raw: str | None) -> int | None:
    """Converte timeout de env; vazio significa usar o padrão."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"ONESIGNAL_REQUEST_TIMEOUT_MS inválido: {raw!r}"
        ) from exc


def _load_from_env() -> OneSignalSettings:
    """Carrega OneSignalSettings a partir de variáveis de ambiente."""
    return OneSignalSettings(
        app_id=os.getenv("ONESIGNAL_APP_ID", ""),
        api_key=os.getenv("ONESIGNAL_API_KEY", ""),
        request_timeout_ms=_parse_timeout(os.getenv("ONESIGNAL_REQUEST_TIMEOUT_MS")),
        api_base_url=os.getenv("ONESIGNAL_API_BASE_URL", ONESIGNAL_API_BASE_URL),
    )


@lru_cache(maxsize=1)
def get_onesignal_settings() -> OneSignalSettings:
    """Retorna instância cacheada de OneSignalSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
