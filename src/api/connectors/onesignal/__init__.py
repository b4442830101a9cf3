"""Conector OneSignal - adapter de borda para a REST API.

Este módulo é o único ponto de IO de rede do projeto.
Responsabilidades:
- Envelope de requisição (auth Basic, timeout, query string)
- Despacho de GET/POST/PUT/PATCH/DELETE via httpx
- Classificação de erros do upstream
"""

from .api_errors import OneSignalApiError, is_permanent_status, parse_api_error
from .http_client import OneSignalHttpClient, create_onesignal_http_client
from .models import HttpMethod, RequestEnvelope

__all__ = [
    "HttpMethod",
    "OneSignalApiError",
    "OneSignalHttpClient",
    "RequestEnvelope",
    "create_onesignal_http_client",
    "is_permanent_status",
    "parse_api_error",
]
