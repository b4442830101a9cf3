"""Formatter JSON com os campos obrigatórios de todo log do conector."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável: facilita leitura em ambientes sem agregador
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "WARNING",
            "logger": "api.connectors.onesignal.api_logging",
            "message": "onesignal_api_error",
            "correlation_id": "abc-123",
            "service": "onesignal_connector",
            "status_code": 400
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
