"""Opções de listagem e consulta aceitas pelos serviços OneSignal.

Modelos Pydantic com extra="forbid": uma opção desconhecida é erro do
chamador, não algo a repassar silenciosamente na query string.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OutcomeTimeRange = Literal["1h", "1d", "1mo"]


class ViewNotificationsOptions(BaseModel):
    """Filtros da listagem de notificações."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: int | None = Field(default=None, ge=1, description="Máximo de itens por página.")
    offset: int | None = Field(default=None, ge=0, description="Deslocamento numérico.")
    kind: Literal[0, 1, 3] | None = Field(
        default=None,
        description="0 = dashboard, 1 = API, 3 = automática.",
    )
    template_id: str | None = Field(default=None, description="Filtra por template.")
    time_offset: str | None = Field(
        default=None,
        description="Cursor temporal; quando presente substitui offset.",
    )


class ViewNotificationOptions(BaseModel):
    """Dados de outcomes anexados à consulta de uma notificação."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome_names: list[str] | None = Field(default=None, description="Nomes dos outcomes.")
    outcome_time_range: OutcomeTimeRange | None = None
    outcome_platforms: str | None = Field(default=None, description="Ex: 0,1 (iOS, Android).")
    outcome_attribution: Literal["direct", "influenced", "unattributed", "total"] | None = None


class ViewOutcomesOptions(BaseModel):
    """Consulta agregada de outcomes da aplicação."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome_names: list[str] = Field(..., min_length=1, description="Nomes dos outcomes.")
    outcome_time_range: OutcomeTimeRange | None = None
    outcome_platforms: str | None = None
    outcome_attribution: Literal["direct", "influenced", "unattributed"] | None = None

    @field_validator("outcome_names")
    @classmethod
    def _names_not_blank(cls, value: list[str]) -> list[str]:
        if any(not name for name in value):
            raise ValueError("outcome_names must not contain empty names")
        return value


__all__ = [
    "OutcomeTimeRange",
    "ViewNotificationOptions",
    "ViewNotificationsOptions",
    "ViewOutcomesOptions",
]
