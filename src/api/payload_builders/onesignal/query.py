"""Construção determinística de query strings de listagem e consulta.

Regras:
- Apenas opções definidas entram na query
- app_id sempre primeiro; depois a ordem de inserção das opções
- Listas viram um único valor separado por vírgula (sem chaves repetidas)
- time_offset (cursor temporal) descarta offset (paginação numérica)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.constants.onesignal import APP_ID_FIELD
from app.domain.options import (
    ViewNotificationOptions,
    ViewNotificationsOptions,
    ViewOutcomesOptions,
)
from utils.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_options(
    model_cls: type[ModelT],
    options: ModelT | Mapping[str, Any] | None,
) -> ModelT | None:
    """Aceita o modelo pronto ou um mapping equivalente.

    Raises:
        ValidationError: Se o mapping não respeitar o modelo
    """
    if options is None or isinstance(options, model_cls):
        return options
    try:
        return model_cls.model_validate(options)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ValidationError(f"invalid {model_cls.__name__}: {problems}") from exc


def options_to_dict(
    model_cls: type[BaseModel],
    options: BaseModel | Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Valida e devolve as opções definidas, na ordem em que o chamador as passou."""
    model = coerce_options(model_cls, options)
    if model is None:
        return {}
    data = model.model_dump(exclude_none=True)
    if isinstance(options, Mapping):
        return {key: data[key] for key in options if key in data}
    return data


def stringify_query_value(value: Any) -> str | None:
    """Converte um valor de opção para a forma usada na query (None = omitir)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return ",".join(str(item) for item in value)
    return str(value)


def build_query_params(
    base: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Mescla base e opções, descartando valores ausentes."""
    params: dict[str, str] = {}
    for key, value in {**base, **(options or {})}.items():
        text = stringify_query_value(value)
        if text is not None:
            params[key] = text
    return params


def view_notifications_params(
    app_id: str,
    options: ViewNotificationsOptions | Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Query da listagem de notificações."""
    data = options_to_dict(ViewNotificationsOptions, options)
    if data.get("time_offset"):
        data.pop("offset", None)
    return build_query_params({APP_ID_FIELD: app_id}, data)


def view_notification_params(
    app_id: str,
    options: ViewNotificationOptions | Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Query da consulta de uma notificação com outcomes."""
    return build_query_params(
        {APP_ID_FIELD: app_id},
        options_to_dict(ViewNotificationOptions, options),
    )


def view_outcomes_params(
    app_id: str,
    options: ViewOutcomesOptions | Mapping[str, Any],
) -> dict[str, str]:
    """Query da consulta agregada de outcomes."""
    if options is None:
        raise ValidationError("outcome_names are required to view outcomes")
    return build_query_params(
        {APP_ID_FIELD: app_id},
        options_to_dict(ViewOutcomesOptions, options),
    )


def pagination_params(limit: int, offset: int) -> dict[str, str]:
    """Query de paginação numérica (listagem de segmentos).

    Raises:
        ValidationError: limit/offset não inteiros, limit < 1 ou offset < 0
    """
    for name, value in (("limit", limit), ("offset", offset)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(f"{name} must be an integer")
    if limit < 1:
        raise ValidationError("limit must be >= 1")
    if offset < 0:
        raise ValidationError("offset must be >= 0")
    return build_query_params({"limit": limit, "offset": offset})
