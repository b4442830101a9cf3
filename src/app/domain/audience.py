"""Valores de domínio para segmentação de notificações.

A audiência é uma união etiquetada: cada envio usa exatamente um modo
(alias, subscription ids, segmentos, filtros ou objeto bruto do chamador).
Cada variante é imutável e sabe se renderizar no formato da REST API.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

from app.constants.onesignal import (
    INCLUDE_ALIASES_FIELD,
    TARGET_CHANNEL_FIELD,
    AudienceKind,
    NotificationChannel,
)
from utils.errors import ValidationError

DelayedOption = Literal["timezone", "last-active"]
_DELAYED_OPTIONS: frozenset[str] = frozenset({"timezone", "last-active"})


def as_id_list(value: Any) -> tuple[Any, ...]:
    """Normaliza valor escalar ou lista em tupla de ids.

    Lista ou tupla passa sem alteração de ordem; qualquer outro valor
    (str, int, ...) vira tupla de um elemento. None e "" contam como ausentes.
    """
    if value is None or value == "":
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True, slots=True)
class Filter:
    """Filtro de segmentação (opaco para o gateway).

    Atributos:
        field: Campo filtrado (ex: "tag", "last_session")
        value: Valor comparado
        key: Chave da tag, para filtros de tag
        relation: Relação (ex: "=", ">", "exists")
    """

    field: str
    value: str
    key: str | None = None
    relation: str | None = None

    def __post_init__(self) -> None:
        if not self.field:
            raise ValidationError("filter field is required")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Filter:
        return cls(
            field=data.get("field", ""),
            value=data.get("value", ""),
            key=data.get("key"),
            relation=data.get("relation"),
        )

    def to_payload(self) -> dict[str, str]:
        payload = {"field": self.field}
        if self.key is not None:
            payload["key"] = self.key
        if self.relation is not None:
            payload["relation"] = self.relation
        payload["value"] = self.value
        return payload


def render_filters(filters: Sequence[Filter | Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Renderiza filtros; mappings (ex: {"operator": "OR"}) passam intactos."""
    return [f.to_payload() if isinstance(f, Filter) else dict(f) for f in filters]


@dataclass(frozen=True, slots=True)
class AliasAudience:
    """Alvo por onesignal_id e/ou external_id."""

    kind: ClassVar[AudienceKind] = AudienceKind.ALIAS

    onesignal_ids: tuple[str, ...] = ()
    external_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.onesignal_ids and not self.external_ids:
            raise ValidationError("alias audience requires onesignal_id or external_id")

    @classmethod
    def from_values(
        cls,
        onesignal_id: str | Sequence[str] | None = None,
        external_id: str | Sequence[str] | None = None,
    ) -> AliasAudience:
        """Constrói a partir dos campos de conveniência (escalar ou lista)."""
        return cls(
            onesignal_ids=as_id_list(onesignal_id),
            external_ids=as_id_list(external_id),
        )

    def to_payload(self, channel: NotificationChannel) -> dict[str, Any]:
        aliases: dict[str, list[str]] = {}
        if self.onesignal_ids:
            aliases["onesignal_id"] = list(self.onesignal_ids)
        if self.external_ids:
            aliases["external_id"] = list(self.external_ids)
        return {
            INCLUDE_ALIASES_FIELD: aliases,
            TARGET_CHANNEL_FIELD: str(channel),
        }


@dataclass(frozen=True, slots=True)
class SubscriptionAudience:
    """Alvo por lista de subscription ids."""

    kind: ClassVar[AudienceKind] = AudienceKind.SUBSCRIPTION

    subscription_ids: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.subscription_ids:
            raise ValidationError("subscription audience requires at least one subscription id")

    def to_payload(self, channel: NotificationChannel) -> dict[str, Any]:
        return {"include_subscription_ids": list(self.subscription_ids)}


@dataclass(frozen=True, slots=True)
class SegmentAudience:
    """Alvo por inclusão/exclusão de segmentos."""

    kind: ClassVar[AudienceKind] = AudienceKind.SEGMENT

    included: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.included and not self.excluded:
            raise ValidationError("segment audience requires included or excluded segments")

    def to_payload(self, channel: NotificationChannel) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.included:
            payload["included_segments"] = list(self.included)
        if self.excluded:
            payload["excluded_segments"] = list(self.excluded)
        return payload


@dataclass(frozen=True, slots=True)
class FilterAudience:
    """Alvo por expressão de filtros."""

    kind: ClassVar[AudienceKind] = AudienceKind.FILTER

    filters: tuple[Filter | Mapping[str, Any], ...]

    def __post_init__(self) -> None:
        if not self.filters:
            raise ValidationError("filter audience requires at least one filter")

    def to_payload(self, channel: NotificationChannel) -> dict[str, Any]:
        return {"filters": render_filters(self.filters)}


@dataclass(frozen=True, slots=True)
class RawAudience:
    """Sem modo explícito: o chamador envia a audiência já no formato da API.

    Cobre include_aliases montado à mão, include_phone_numbers, email_to ou
    nenhum alvo.
    """

    kind: ClassVar[AudienceKind] = AudienceKind.RAW

    fields: Mapping[str, Any] = field(default_factory=dict)

    def to_payload(self, channel: NotificationChannel) -> dict[str, Any]:
        return dict(self.fields)


Audience = AliasAudience | SubscriptionAudience | SegmentAudience | FilterAudience | RawAudience


@dataclass(frozen=True, slots=True)
class Scheduling:
    """Opções de agendamento comuns a push, email e SMS."""

    send_after: str | None = None
    delayed_option: DelayedOption | None = None
    delivery_time_of_day: str | None = None
    idempotency_key: str | None = None

    def __post_init__(self) -> None:
        if self.delayed_option is not None and self.delayed_option not in _DELAYED_OPTIONS:
            raise ValidationError(
                f"delayed_option must be one of {sorted(_DELAYED_OPTIONS)}"
            )

    def to_payload(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        if self.send_after is not None:
            payload["send_after"] = self.send_after
        if self.delayed_option is not None:
            payload["delayed_option"] = self.delayed_option
        if self.delivery_time_of_day is not None:
            payload["delivery_time_of_day"] = self.delivery_time_of_day
        if self.idempotency_key is not None:
            payload["idempotency_key"] = self.idempotency_key
        return payload


__all__ = [
    "AliasAudience",
    "Audience",
    "DelayedOption",
    "Filter",
    "FilterAudience",
    "RawAudience",
    "Scheduling",
    "SegmentAudience",
    "SubscriptionAudience",
    "as_id_list",
    "render_filters",
]
