"""Testes do NotificationsService contra o gateway fake."""

from __future__ import annotations

import pytest

from app.domain import AliasAudience, Scheduling, ViewNotificationsOptions
from app.services.onesignal import NotificationsService
from tests.fakes.fake_onesignal_gateway import FakeOneSignalGateway
from utils.errors import ValidationError


@pytest.fixture
def gateway() -> FakeOneSignalGateway:
    return FakeOneSignalGateway(app_id="A1", response={"id": "n1", "errors": []})


@pytest.fixture
def service(gateway: FakeOneSignalGateway) -> NotificationsService:
    return NotificationsService(gateway)


class TestSendNotifications:
    """Envio por canal."""

    @pytest.mark.asyncio
    async def test_push_with_alias_convenience(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        """Fluxo completo: valida, normaliza e envia POST /notifications?c=push."""
        result = await service.send_push_notification(
            {"contents": {"en": "hi"}, "onesignal_id": "u1", "external_id": ["e1", "e2"]}
        )

        assert result == {"id": "n1", "errors": []}
        call = gateway.last_call
        assert call.method == "POST"
        assert call.path == "/notifications?c=push"
        assert call.body == {
            "contents": {"en": "hi"},
            "app_id": "A1",
            "include_aliases": {"onesignal_id": ["u1"], "external_id": ["e1", "e2"]},
            "target_channel": "push",
        }

    @pytest.mark.asyncio
    async def test_email_with_typed_audience(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        await service.send_email_notification(
            {"email_subject": "Olá", "email_body": "<p>oi</p>"},
            audience=AliasAudience.from_values(external_id="e1"),
            scheduling=Scheduling(idempotency_key="idem-1"),
        )

        call = gateway.last_call
        assert call.path == "/notifications?c=email"
        assert call.body["target_channel"] == "email"
        assert call.body["idempotency_key"] == "idem-1"

    @pytest.mark.asyncio
    async def test_sms(self, service: NotificationsService, gateway: FakeOneSignalGateway) -> None:
        await service.send_sms_notification(
            {"contents": {"en": "hi"}, "sms_from": "+15550001", "include_subscription_ids": ["s1"]}
        )

        call = gateway.last_call
        assert call.path == "/notifications?c=sms"
        assert call.body["include_subscription_ids"] == ["s1"]
        assert "target_channel" not in call.body

    @pytest.mark.asyncio
    async def test_invalid_push_never_reaches_gateway(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError, match="contents are required"):
            await service.send_push_notification({"external_id": "e1"})

        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_invalid_email_never_reaches_gateway(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError):
            await service.send_email_notification({"email_body": "x"})

        assert gateway.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("sms", "message"),
        [
            ({"contents": {"en": "hi"}}, "sms_from is required"),
            ({"sms_from": "+15550001"}, "contents.en is required"),
            ({"contents": {"pt": "oi"}, "sms_from": "+15550001"}, "contents.en is required"),
        ],
    )
    async def test_invalid_sms_never_reaches_gateway(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
        sms: dict[str, object],
        message: str,
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            await service.send_sms_notification(sms)

        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_push_with_numeric_external_id(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        """external_id escalar não-string também vira lista."""
        await service.send_push_notification({"contents": {"en": "hi"}, "external_id": 123})

        assert gateway.last_call.body["include_aliases"] == {"external_id": [123]}
        assert "external_id" not in gateway.last_call.body

    @pytest.mark.asyncio
    async def test_non_list_filters_never_reach_gateway(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError, match="filters must be a list"):
            await service.send_push_notification({"contents": {"en": "hi"}, "filters": 1})

        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_mixed_audience_never_reaches_gateway(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError, match="mutually exclusive"):
            await service.send_push_notification(
                {"contents": {"en": "hi"}, "external_id": "e1", "filters": [{"field": "tag"}]}
            )

        assert gateway.calls == []


class TestViewAndCancel:
    """Consulta, listagem e cancelamento."""

    @pytest.mark.asyncio
    async def test_view_notifications_time_offset(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        await service.view_notifications(
            {"limit": 5, "offset": 10, "time_offset": "2026-10-01T00:00:00Z"}
        )

        call = gateway.last_call
        assert call.method == "GET"
        assert call.path == "/notifications?c=messages"
        assert call.body is None
        assert call.params == {
            "app_id": "A1",
            "limit": "5",
            "time_offset": "2026-10-01T00:00:00Z",
        }

    @pytest.mark.asyncio
    async def test_view_notifications_with_model(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        await service.view_notifications(ViewNotificationsOptions(template_id="t1"))

        assert gateway.last_call.params == {"app_id": "A1", "template_id": "t1"}

    @pytest.mark.asyncio
    async def test_view_notification_encodes_id(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        await service.view_notification("n/1", {"outcome_names": ["os__click.count"]})

        call = gateway.last_call
        assert call.path == "/notifications/n%2F1"
        assert call.params == {"app_id": "A1", "outcome_names": "os__click.count"}

    @pytest.mark.asyncio
    async def test_cancel_notification(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        result = await service.cancel_notification("n1")

        assert result == gateway.response
        call = gateway.last_call
        assert call.method == "DELETE"
        assert call.path == "/notifications/n1"
        assert call.params == {"app_id": "A1"}

    @pytest.mark.asyncio
    async def test_cancel_requires_id(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError, match="notification_id"):
            await service.cancel_notification("")

        assert gateway.calls == []


class TestLiveActivities:
    @pytest.mark.asyncio
    async def test_start(self, service: NotificationsService, gateway: FakeOneSignalGateway) -> None:
        payload = {
            "event": "start",
            "activity_id": "act-1",
            "name": "order",
            "contents": {"en": "a caminho"},
            "headings": {"en": "Pedido"},
            "event_attributes": {},
            "event_updates": {},
        }

        await service.start_live_activity("OrderAttributes", payload)

        call = gateway.last_call
        assert call.method == "POST"
        assert call.path == "/apps/A1/activities/activity/OrderAttributes"
        assert call.body == payload

    @pytest.mark.asyncio
    async def test_update(self, service: NotificationsService, gateway: FakeOneSignalGateway) -> None:
        await service.update_live_activity(
            "act 1",
            {"event": "end", "name": "order", "event_updates": {"status": "done"}},
        )

        assert gateway.last_call.path == "/apps/A1/live_activities/act%201/notifications"

    @pytest.mark.asyncio
    async def test_update_invalid_event(
        self,
        service: NotificationsService,
        gateway: FakeOneSignalGateway,
    ) -> None:
        with pytest.raises(ValidationError):
            await service.update_live_activity("act-1", {"event": "start", "name": "n"})

        assert gateway.calls == []
