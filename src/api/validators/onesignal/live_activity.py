"""Validadores de Live Activities (iOS)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.onesignal.common import require_mapping
from utils.errors import ValidationError

_START_REQUIRED = ("activity_id", "name", "contents", "headings")
_UPDATE_EVENTS = frozenset({"update", "end"})


def validate_start_live_activity(payload: Mapping[str, Any]) -> None:
    """Valida início de Live Activity.

    Raises:
        ValidationError: event diferente de "start" ou campo obrigatório ausente
    """
    require_mapping(payload, "live activity input")
    if payload.get("event") != "start":
        raise ValidationError('event must be "start" to start a live activity')
    for name in _START_REQUIRED:
        if not payload.get(name):
            raise ValidationError(f"{name} is required to start a live activity")
    if "event_attributes" not in payload or "event_updates" not in payload:
        raise ValidationError(
            "event_attributes and event_updates are required to start a live activity"
        )


def validate_update_live_activity(payload: Mapping[str, Any]) -> None:
    """Valida atualização/encerramento de Live Activity."""
    require_mapping(payload, "live activity input")
    if payload.get("event") not in _UPDATE_EVENTS:
        raise ValidationError('event must be "update" or "end"')
    if not payload.get("name"):
        raise ValidationError("name is required to update a live activity")
    if "event_updates" not in payload:
        raise ValidationError("event_updates is required to update a live activity")
