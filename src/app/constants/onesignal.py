"""Constantes do domínio OneSignal."""

from __future__ import annotations

from enum import StrEnum


class NotificationChannel(StrEnum):
    """Canais de envio; também usados como discriminador ?c= do endpoint."""

    PUSH = "push"
    EMAIL = "email"
    SMS = "sms"


class AudienceKind(StrEnum):
    """Modos de segmentação mutuamente exclusivos."""

    ALIAS = "alias"
    SUBSCRIPTION = "subscription"
    SEGMENT = "segment"
    FILTER = "filter"
    RAW = "raw"


# Campos de conveniência (escalar ou lista) convertidos em include_aliases
ALIAS_CONVENIENCE_FIELDS: tuple[str, ...] = ("onesignal_id", "external_id")

# Campos que ativam cada modo explícito de audiência
SUBSCRIPTION_FIELDS: tuple[str, ...] = ("include_subscription_ids",)
SEGMENT_FIELDS: tuple[str, ...] = ("included_segments", "excluded_segments")
FILTER_FIELDS: tuple[str, ...] = ("filters",)

INCLUDE_ALIASES_FIELD = "include_aliases"
TARGET_CHANNEL_FIELD = "target_channel"
APP_ID_FIELD = "app_id"

# Discriminador da listagem de notificações
MESSAGES_LISTING_KIND = "messages"

# Paginação padrão de segmentos
DEFAULT_SEGMENTS_LIMIT = 50
DEFAULT_SEGMENTS_OFFSET = 0
