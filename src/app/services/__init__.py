"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
O único IO de rede fica no gateway em api/connectors/onesignal.
"""

from app.services.onesignal import (
    AnalyticsService,
    AppsService,
    NotificationsService,
    SegmentsService,
    SubscriptionsService,
    UsersService,
)

__all__ = [
    "AnalyticsService",
    "AppsService",
    "NotificationsService",
    "SegmentsService",
    "SubscriptionsService",
    "UsersService",
]
