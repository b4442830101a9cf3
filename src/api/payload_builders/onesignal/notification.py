"""Builder de payload para criação de notificações (push, email, SMS)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.onesignal.endpoints import NOTIFICATIONS_PATH, encode_query
from api.payload_builders.onesignal.audience import (
    detect_audience_modes,
    normalize_alias_targeting,
)
from app.constants.onesignal import APP_ID_FIELD, INCLUDE_ALIASES_FIELD, NotificationChannel
from utils.errors import ValidationError

if TYPE_CHECKING:
    from app.domain.audience import Audience, Scheduling


def create_notification_path(channel: NotificationChannel) -> str:
    """Endpoint único de criação, discriminado por ?c=<canal>."""
    return f"{NOTIFICATIONS_PATH}?{encode_query({'c': str(channel)})}"


def build_notification_payload(
    channel: NotificationChannel,
    notification: Mapping[str, Any],
    app_id: str,
    *,
    audience: Audience | None = None,
    scheduling: Scheduling | None = None,
) -> dict[str, Any]:
    """Constrói o corpo de criação de notificação.

    Ordem das chaves: campos do chamador, agendamento, audiência tipada,
    app_id e, por fim, include_aliases/target_channel da normalização.

    Args:
        channel: Canal de envio
        notification: Campos do chamador (não é modificado)
        app_id: app_id configurado; sobrescreve qualquer valor do chamador
        audience: Audiência tipada, alternativa aos campos do payload
        scheduling: Agendamento tipado

    Returns:
        Payload pronto para POST /notifications

    Raises:
        ValidationError: Audiência informada duas vezes ou modos combinados
    """
    payload: dict[str, Any] = dict(notification)

    if scheduling is not None:
        payload.update(scheduling.to_payload())

    if audience is not None:
        if detect_audience_modes(payload) or payload.get(INCLUDE_ALIASES_FIELD):
            raise ValidationError(
                "audience given both as argument and in the notification payload"
            )
        payload.update(audience.to_payload(channel))

    payload[APP_ID_FIELD] = app_id
    return normalize_alias_targeting(payload, channel)
