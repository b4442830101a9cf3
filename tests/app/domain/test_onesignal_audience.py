"""Testes dos valores de domínio de audiência e agendamento."""

from __future__ import annotations

import pytest

from app.constants.onesignal import AudienceKind, NotificationChannel
from app.domain import (
    AliasAudience,
    Filter,
    FilterAudience,
    RawAudience,
    Scheduling,
    SegmentAudience,
    SubscriptionAudience,
)
from app.domain.audience import as_id_list
from utils.errors import ValidationError


class TestAsIdList:
    def test_scalar(self) -> None:
        assert as_id_list("u1") == ("u1",)

    def test_list_keeps_order(self) -> None:
        assert as_id_list(["b", "a"]) == ("b", "a")

    def test_empty(self) -> None:
        assert as_id_list(None) == ()
        assert as_id_list("") == ()

    def test_non_string_scalar_is_wrapped(self) -> None:
        """Escalar não-string (ex: int) vira tupla de um elemento."""
        assert as_id_list(123) == (123,)

    def test_alias_audience_from_int_id(self) -> None:
        audience = AliasAudience.from_values(external_id=123)

        assert audience.to_payload(NotificationChannel.PUSH) == {
            "include_aliases": {"external_id": [123]},
            "target_channel": "push",
        }


class TestAudienceVariants:
    def test_kinds(self) -> None:
        assert AliasAudience.kind is AudienceKind.ALIAS
        assert SubscriptionAudience.kind is AudienceKind.SUBSCRIPTION
        assert SegmentAudience.kind is AudienceKind.SEGMENT
        assert FilterAudience.kind is AudienceKind.FILTER
        assert RawAudience.kind is AudienceKind.RAW

    def test_alias_payload(self) -> None:
        audience = AliasAudience.from_values(onesignal_id=["u1"], external_id="e1")

        assert audience.to_payload(NotificationChannel.EMAIL) == {
            "include_aliases": {"onesignal_id": ["u1"], "external_id": ["e1"]},
            "target_channel": "email",
        }

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: AliasAudience(),
            lambda: SubscriptionAudience(()),
            lambda: SegmentAudience(),
            lambda: FilterAudience(()),
        ],
    )
    def test_empty_variants_raise(self, factory) -> None:
        with pytest.raises(ValidationError):
            factory()

    def test_segment_payload(self) -> None:
        audience = SegmentAudience(included=("All",), excluded=("Churned",))

        assert audience.to_payload(NotificationChannel.PUSH) == {
            "included_segments": ["All"],
            "excluded_segments": ["Churned"],
        }

    def test_raw_payload_is_copy(self) -> None:
        fields = {"include_phone_numbers": ["+1555"]}

        payload = RawAudience(fields).to_payload(NotificationChannel.SMS)

        assert payload == fields
        assert payload is not fields

    def test_audience_is_immutable(self) -> None:
        audience = SubscriptionAudience(("s1",))

        with pytest.raises(AttributeError):
            audience.subscription_ids = ("s2",)  # type: ignore[misc]


class TestFilter:
    def test_payload_omits_missing_members(self) -> None:
        assert Filter(field="country", value="BR", relation="=").to_payload() == {
            "field": "country",
            "relation": "=",
            "value": "BR",
        }

    def test_from_mapping(self) -> None:
        filter_ = Filter.from_mapping({"field": "tag", "key": "tier", "value": "gold"})

        assert filter_ == Filter(field="tag", value="gold", key="tier")

    def test_field_required(self) -> None:
        with pytest.raises(ValidationError, match="filter field"):
            Filter(field="", value="x")


class TestScheduling:
    def test_payload_only_defined_members(self) -> None:
        scheduling = Scheduling(delayed_option="last-active", idempotency_key="k1")

        assert scheduling.to_payload() == {
            "delayed_option": "last-active",
            "idempotency_key": "k1",
        }

    def test_invalid_delayed_option(self) -> None:
        with pytest.raises(ValidationError, match="delayed_option"):
            Scheduling(delayed_option="tomorrow")  # type: ignore[arg-type]
