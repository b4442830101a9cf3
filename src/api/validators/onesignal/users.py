"""Validadores de usuários e eventos customizados."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from api.validators.onesignal.common import is_absent, require_mapping
from utils.errors import ValidationError


def validate_create_user(payload: Mapping[str, Any]) -> None:
    """Valida criação de usuário.

    Raises:
        ValidationError: Se identity.external_id ausente
    """
    require_mapping(payload, "create user input")
    identity = payload.get("identity")
    if not isinstance(identity, Mapping) or not identity.get("external_id"):
        raise ValidationError("identity.external_id is required to create a user")


def validate_update_user(payload: Mapping[str, Any]) -> None:
    """Exige ao menos properties ou deltas."""
    require_mapping(payload, "update user input")
    if is_absent(payload.get("properties")) and is_absent(payload.get("deltas")):
        raise ValidationError("at least one of properties or deltas must be provided")


def validate_custom_events(events: Sequence[Mapping[str, Any]] | None) -> None:
    """Valida lote de eventos customizados.

    Raises:
        ValidationError: Lote vazio, evento sem name, ou sem external_id
            e onesignal_id
    """
    if not events or isinstance(events, (str, Mapping)):
        raise ValidationError("at least one event is required")
    for index, event in enumerate(events):
        require_mapping(event, f"events[{index}]")
        if not event.get("name"):
            raise ValidationError(f"events[{index}].name is required")
        if not event.get("external_id") and not event.get("onesignal_id"):
            raise ValidationError(
                f"events[{index}] requires either external_id or onesignal_id"
            )
