"""Fachada tipada sobre a REST API do OneSignal.

Uso:
    from app.bootstrap import create_onesignal_client

    async with create_onesignal_client() as client:
        await client.send_push_notification(
            {"contents": {"en": "hi"}, "external_id": "user-1"}
        )

Cada método delega ao serviço de recurso correspondente e devolve o corpo
JSON do upstream sem alterações.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from app.services.onesignal import (
    AnalyticsService,
    AppsService,
    NotificationsService,
    SegmentsService,
    SubscriptionsService,
    UsersService,
)

if TYPE_CHECKING:
    import httpx

    from api.connectors.onesignal import OneSignalHttpClient
    from app.domain.audience import Audience, Scheduling
    from app.domain.options import (
        ViewNotificationOptions,
        ViewNotificationsOptions,
        ViewOutcomesOptions,
    )
    from config.settings import OneSignalSettings


class OneSignalClient:
    """Agrega os seis serviços de recurso sobre um único gateway."""

    def __init__(self, gateway: OneSignalHttpClient) -> None:
        self._gateway = gateway
        self.notifications = NotificationsService(gateway)
        self.users = UsersService(gateway)
        self.subscriptions = SubscriptionsService(gateway)
        self.segments = SegmentsService(gateway)
        self.analytics = AnalyticsService(gateway)
        self.apps = AppsService(gateway)

    @classmethod
    def from_settings(
        cls,
        settings: OneSignalSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> OneSignalClient:
        """Monta gateway e serviços a partir de settings validadas."""
        from api.connectors.onesignal import OneSignalHttpClient

        return cls(OneSignalHttpClient(settings, http_client))

    @property
    def app_id(self) -> str:
        return self._gateway.app_id

    async def aclose(self) -> None:
        await self._gateway.aclose()

    async def __aenter__(self) -> OneSignalClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Notificações ─────────────────────────────────────────────────────

    async def send_push_notification(
        self,
        notification: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        return await self.notifications.send_push_notification(
            notification, audience=audience, scheduling=scheduling
        )

    async def send_email_notification(
        self,
        email: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        return await self.notifications.send_email_notification(
            email, audience=audience, scheduling=scheduling
        )

    async def send_sms_notification(
        self,
        sms: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        return await self.notifications.send_sms_notification(
            sms, audience=audience, scheduling=scheduling
        )

    async def view_notifications(
        self,
        options: ViewNotificationsOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        return await self.notifications.view_notifications(options)

    async def view_notification(
        self,
        notification_id: str,
        options: ViewNotificationOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        return await self.notifications.view_notification(notification_id, options)

    async def cancel_notification(self, notification_id: str) -> Any:
        return await self.notifications.cancel_notification(notification_id)

    async def start_live_activity(self, activity_type: str, payload: Mapping[str, Any]) -> Any:
        return await self.notifications.start_live_activity(activity_type, payload)

    async def update_live_activity(self, activity_id: str, payload: Mapping[str, Any]) -> Any:
        return await self.notifications.update_live_activity(activity_id, payload)

    # ── Usuários ─────────────────────────────────────────────────────────

    async def create_user(self, user: Mapping[str, Any]) -> Any:
        return await self.users.create_user(user)

    async def view_user(self, alias_label: str, alias_id: str) -> Any:
        return await self.users.view_user(alias_label, alias_id)

    async def update_user(
        self,
        alias_label: str,
        alias_id: str,
        update: Mapping[str, Any],
    ) -> Any:
        return await self.users.update_user(alias_label, alias_id, update)

    async def delete_user(self, alias_label: str, alias_id: str) -> Any:
        return await self.users.delete_user(alias_label, alias_id)

    async def view_user_identity(self, alias_label: str, alias_id: str) -> Any:
        return await self.users.view_user_identity(alias_label, alias_id)

    async def view_user_identity_by_subscription(self, subscription_id: str) -> Any:
        return await self.users.view_user_identity_by_subscription(subscription_id)

    async def create_custom_events(self, events: Sequence[Mapping[str, Any]]) -> Any:
        return await self.users.create_custom_events(events)

    # ── Subscriptions ────────────────────────────────────────────────────

    async def create_subscription(self, subscription: Mapping[str, Any]) -> Any:
        return await self.subscriptions.create_subscription(subscription)

    async def view_subscription(self, subscription_id: str) -> Any:
        return await self.subscriptions.view_subscription(subscription_id)

    async def update_subscription(
        self,
        subscription_id: str,
        update: Mapping[str, Any],
    ) -> Any:
        return await self.subscriptions.update_subscription(subscription_id, update)

    async def delete_subscription(self, subscription_id: str) -> Any:
        return await self.subscriptions.delete_subscription(subscription_id)

    # ── Segmentos ────────────────────────────────────────────────────────

    async def create_segment(self, segment: Mapping[str, Any]) -> Any:
        return await self.segments.create_segment(segment)

    async def view_segments(self, limit: int | None = None, offset: int | None = None) -> Any:
        kwargs = {
            key: value
            for key, value in (("limit", limit), ("offset", offset))
            if value is not None
        }
        return await self.segments.view_segments(**kwargs)

    async def view_segment(self, segment_id: str) -> Any:
        return await self.segments.view_segment(segment_id)

    async def update_segment(self, segment_id: str, update: Mapping[str, Any]) -> Any:
        return await self.segments.update_segment(segment_id, update)

    async def delete_segment(self, segment_id: str) -> Any:
        return await self.segments.delete_segment(segment_id)

    # ── Analytics / Apps ─────────────────────────────────────────────────

    async def view_outcomes(self, options: ViewOutcomesOptions | Mapping[str, Any]) -> Any:
        return await self.analytics.view_outcomes(options)

    async def view_app(self) -> Any:
        return await self.apps.view_app()
