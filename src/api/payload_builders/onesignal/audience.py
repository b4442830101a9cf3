"""Resolução e normalização da audiência de notificações.

Converte o payload do chamador na variante de audiência correspondente e
aplica a segmentação simplificada (onesignal_id / external_id).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.constants.onesignal import (
    ALIAS_CONVENIENCE_FIELDS,
    FILTER_FIELDS,
    INCLUDE_ALIASES_FIELD,
    SEGMENT_FIELDS,
    SUBSCRIPTION_FIELDS,
    AudienceKind,
    NotificationChannel,
)
from app.domain.audience import (
    AliasAudience,
    Audience,
    FilterAudience,
    RawAudience,
    SegmentAudience,
    SubscriptionAudience,
    as_id_list,
)
from utils.errors import ValidationError

# Campos que ativam cada modo explícito, em ordem de detecção
_MODE_FIELDS: tuple[tuple[AudienceKind, tuple[str, ...]], ...] = (
    (AudienceKind.ALIAS, ALIAS_CONVENIENCE_FIELDS),
    (AudienceKind.SUBSCRIPTION, SUBSCRIPTION_FIELDS),
    (AudienceKind.SEGMENT, SEGMENT_FIELDS),
    (AudienceKind.FILTER, FILTER_FIELDS),
)


def detect_audience_modes(payload: Mapping[str, Any]) -> list[AudienceKind]:
    """Lista os modos explícitos presentes (valores vazios contam como ausentes)."""
    return [
        kind
        for kind, fields in _MODE_FIELDS
        if any(payload.get(name) for name in fields)
    ]


def resolve_audience(payload: Mapping[str, Any]) -> Audience:
    """Identifica a variante de audiência do payload.

    Args:
        payload: Payload de notificação do chamador

    Returns:
        Variante correspondente; RawAudience quando nenhum modo explícito

    Raises:
        ValidationError: Se mais de um modo estiver presente
    """
    modes = detect_audience_modes(payload)
    if len(modes) > 1:
        raise ValidationError(
            "audience modes are mutually exclusive, got: " + ", ".join(modes)
        )

    if not modes:
        return RawAudience()

    mode = modes[0]
    if mode is AudienceKind.ALIAS:
        if payload.get(INCLUDE_ALIASES_FIELD):
            raise ValidationError(
                "onesignal_id/external_id cannot be combined with include_aliases"
            )
        return AliasAudience.from_values(
            onesignal_id=payload.get("onesignal_id") or None,
            external_id=payload.get("external_id") or None,
        )
    if mode is AudienceKind.SUBSCRIPTION:
        return SubscriptionAudience(as_id_list(payload["include_subscription_ids"]))
    if mode is AudienceKind.SEGMENT:
        return SegmentAudience(
            included=as_id_list(payload.get("included_segments")),
            excluded=as_id_list(payload.get("excluded_segments")),
        )
    filters = payload["filters"]
    if not isinstance(filters, (list, tuple)):
        raise ValidationError("filters must be a list")
    return FilterAudience(tuple(filters))


def normalize_alias_targeting(
    payload: Mapping[str, Any],
    channel: NotificationChannel,
) -> dict[str, Any]:
    """Aplica a segmentação simplificada por alias.

    Com onesignal_id e/ou external_id (escalar ou lista): monta
    include_aliases com listas, define target_channel e remove os campos de
    conveniência. Sem eles, devolve uma cópia sem alterações, então aplicar
    duas vezes equivale a aplicar uma. Os demais modos passam intactos.

    Args:
        payload: Payload de notificação (não é modificado)
        channel: Canal de envio atual

    Returns:
        Novo dict pronto para transmissão

    Raises:
        ValidationError: Se modos de audiência forem combinados
    """
    audience = resolve_audience(payload)
    normalized = {
        key: value for key, value in payload.items() if key not in ALIAS_CONVENIENCE_FIELDS
    }
    if isinstance(audience, AliasAudience):
        normalized.update(audience.to_payload(channel))
    return normalized
