"""Validadores de segmentos."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.validators.onesignal.common import require_mapping
from utils.errors import ValidationError


def validate_create_segment(payload: Mapping[str, Any]) -> None:
    """Exige name e ao menos um filtro."""
    require_mapping(payload, "create segment input")
    if not payload.get("name"):
        raise ValidationError("name is required to create a segment")
    if not payload.get("filters"):
        raise ValidationError("filters are required to create a segment")


def validate_update_segment(payload: Mapping[str, Any]) -> None:
    require_mapping(payload, "update segment input")
    if "name" not in payload and "filters" not in payload:
        raise ValidationError("at least one of name or filters must be provided")
