"""Builders de payload e query para a REST API do OneSignal."""

from api.payload_builders.onesignal.audience import (
    detect_audience_modes,
    normalize_alias_targeting,
    resolve_audience,
)
from api.payload_builders.onesignal.notification import (
    build_notification_payload,
    create_notification_path,
)
from api.payload_builders.onesignal.query import (
    build_query_params,
    coerce_options,
    pagination_params,
    view_notification_params,
    view_notifications_params,
    view_outcomes_params,
)

__all__ = [
    "build_notification_payload",
    "build_query_params",
    "coerce_options",
    "create_notification_path",
    "detect_audience_modes",
    "normalize_alias_targeting",
    "pagination_params",
    "resolve_audience",
    "view_notification_params",
    "view_notifications_params",
    "view_outcomes_params",
]
