"""Regras compartilhadas pelos validadores OneSignal."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from utils.errors import ValidationError


def require_identifier(value: str | None, name: str) -> str:
    """Garante identificador não vazio para compor caminhos.

    Raises:
        ValidationError: Se ausente ou só espaços
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return value


def require_mapping(value: Any, name: str) -> Mapping[str, Any]:
    """Garante que o input do chamador é um objeto (dict/mapping)."""
    if not isinstance(value, Mapping):
        raise ValidationError(f"{name} must be an object")
    return value


def is_absent(value: Any) -> bool:
    """None ou "" contam como ausentes; dict/lista vazios contam como presentes."""
    return value is None or value == ""
