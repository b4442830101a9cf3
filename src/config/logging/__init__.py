"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que consome o conector
    configure_logging(level="INFO", service_name="onesignal_connector")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("onesignal_request_success", extra={"status_code": 200})

Nunca registrar a api_key nem o conteúdo das notificações.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
