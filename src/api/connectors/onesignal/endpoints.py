"""Helpers de caminho e query string para a REST API do OneSignal.

Todo segmento dinâmico (app_id, ids, alias labels) passa por quote_segment.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import quote

NOTIFICATIONS_PATH = "/notifications"
PLAYERS_PATH = "/players"
OUTCOMES_PATH = "/outcomes"


def quote_segment(value: str) -> str:
    """Percent-encode de um segmento de caminho (inclusive '/')."""
    return quote(str(value), safe="")


def encode_query(params: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Serializa pares chave/valor em query string.

    Chaves e valores são percent-encoded; a ordem de inserção é mantida.
    """
    items = params.items() if isinstance(params, Mapping) else params
    return "&".join(f"{quote_segment(key)}={quote_segment(value)}" for key, value in items)


def app_path(app_id: str, suffix: str = "") -> str:
    """Retorna /apps/{app_id}{suffix} com o app_id codificado.

    Args:
        app_id: Identificador da aplicação
        suffix: Restante do caminho, já com segmentos codificados
    """
    return f"/apps/{quote_segment(app_id)}{suffix}"


def user_alias_path(app_id: str, alias_label: str, alias_id: str) -> str:
    """Caminho de um usuário identificado por alias."""
    return app_path(
        app_id,
        f"/users/by/{quote_segment(alias_label)}/{quote_segment(alias_id)}",
    )


def notification_path(notification_id: str) -> str:
    return f"{NOTIFICATIONS_PATH}/{quote_segment(notification_id)}"


def player_path(subscription_id: str) -> str:
    return f"{PLAYERS_PATH}/{quote_segment(subscription_id)}"
