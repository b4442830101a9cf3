"""Serviços de recurso OneSignal.

Cada serviço valida o input, monta caminho/corpo/query e delega ao
gateway; o resultado volta sem alterações.
"""

from app.services.onesignal.analytics import AnalyticsService
from app.services.onesignal.apps import AppsService
from app.services.onesignal.base import OneSignalResourceService
from app.services.onesignal.notifications import NotificationsService
from app.services.onesignal.segments import SegmentsService
from app.services.onesignal.subscriptions import SubscriptionsService
from app.services.onesignal.users import UsersService

__all__ = [
    "AnalyticsService",
    "AppsService",
    "NotificationsService",
    "OneSignalResourceService",
    "SegmentsService",
    "SubscriptionsService",
    "UsersService",
]
