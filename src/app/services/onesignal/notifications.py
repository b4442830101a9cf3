"""Serviço de notificações: envio por canal, consulta, cancelamento e Live Activities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from api.connectors.onesignal.endpoints import (
    NOTIFICATIONS_PATH,
    app_path,
    encode_query,
    notification_path,
    quote_segment,
)
from api.connectors.onesignal.models import HttpMethod
from api.payload_builders.onesignal import (
    build_notification_payload,
    create_notification_path,
    view_notification_params,
    view_notifications_params,
)
from api.validators.onesignal import (
    require_identifier,
    validate_email_notification,
    validate_push_notification,
    validate_sms_notification,
    validate_start_live_activity,
    validate_update_live_activity,
)
from app.constants.onesignal import APP_ID_FIELD, MESSAGES_LISTING_KIND, NotificationChannel
from app.services.onesignal.base import OneSignalResourceService

if TYPE_CHECKING:
    from app.domain.audience import Audience, Scheduling
    from app.domain.options import ViewNotificationOptions, ViewNotificationsOptions

_VALIDATORS: dict[NotificationChannel, Callable[[Mapping[str, Any]], None]] = {
    NotificationChannel.PUSH: validate_push_notification,
    NotificationChannel.EMAIL: validate_email_notification,
    NotificationChannel.SMS: validate_sms_notification,
}

_LISTING_PATH = f"{NOTIFICATIONS_PATH}?{encode_query({'c': MESSAGES_LISTING_KIND})}"


class NotificationsService(OneSignalResourceService):
    """Operações sobre /notifications e Live Activities."""

    __slots__ = ()

    async def send_push_notification(
        self,
        notification: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        """Envia push. Exige contents."""
        return await self._send(NotificationChannel.PUSH, notification, audience, scheduling)

    async def send_email_notification(
        self,
        email: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        """Envia email. Exige email_subject e email_body (ou template_id)."""
        return await self._send(NotificationChannel.EMAIL, email, audience, scheduling)

    async def send_sms_notification(
        self,
        sms: Mapping[str, Any],
        *,
        audience: Audience | None = None,
        scheduling: Scheduling | None = None,
    ) -> Any:
        """Envia SMS. Exige contents.en (ou template_id) e sms_from."""
        return await self._send(NotificationChannel.SMS, sms, audience, scheduling)

    async def _send(
        self,
        channel: NotificationChannel,
        notification: Mapping[str, Any],
        audience: Audience | None,
        scheduling: Scheduling | None,
    ) -> Any:
        # Validação antes de montar o payload: nenhuma I/O em caso de erro
        _VALIDATORS[channel](notification)
        payload = build_notification_payload(
            channel,
            notification,
            self.app_id,
            audience=audience,
            scheduling=scheduling,
        )
        return await self._gateway.execute(
            HttpMethod.POST,
            create_notification_path(channel),
            payload,
        )

    async def view_notifications(
        self,
        options: ViewNotificationsOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """Lista mensagens; time_offset substitui offset na paginação."""
        params = view_notifications_params(self.app_id, options)
        return await self._gateway.execute(HttpMethod.GET, _LISTING_PATH, params=params)

    async def view_notification(
        self,
        notification_id: str,
        options: ViewNotificationOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        require_identifier(notification_id, "notification_id")
        params = view_notification_params(self.app_id, options)
        return await self._gateway.execute(
            HttpMethod.GET,
            notification_path(notification_id),
            params=params,
        )

    async def cancel_notification(self, notification_id: str) -> Any:
        """Cancela notificação agendada."""
        require_identifier(notification_id, "notification_id")
        return await self._gateway.execute(
            HttpMethod.DELETE,
            notification_path(notification_id),
            params={APP_ID_FIELD: self.app_id},
        )

    async def start_live_activity(
        self,
        activity_type: str,
        payload: Mapping[str, Any],
    ) -> Any:
        """Inicia Live Activity (iOS) para o tipo informado."""
        require_identifier(activity_type, "activity_type")
        validate_start_live_activity(payload)
        path = app_path(self.app_id, f"/activities/activity/{quote_segment(activity_type)}")
        return await self._gateway.execute(HttpMethod.POST, path, dict(payload))

    async def update_live_activity(
        self,
        activity_id: str,
        payload: Mapping[str, Any],
    ) -> Any:
        """Atualiza ou encerra Live Activity existente."""
        require_identifier(activity_id, "activity_id")
        validate_update_live_activity(payload)
        path = app_path(
            self.app_id,
            f"/live_activities/{quote_segment(activity_id)}/notifications",
        )
        return await self._gateway.execute(HttpMethod.POST, path, dict(payload))
