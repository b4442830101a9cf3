"""Serviço de analytics (outcomes agregados)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.connectors.onesignal.endpoints import OUTCOMES_PATH
from api.connectors.onesignal.models import HttpMethod
from api.payload_builders.onesignal import view_outcomes_params
from app.domain.options import ViewOutcomesOptions
from app.services.onesignal.base import OneSignalResourceService


class AnalyticsService(OneSignalResourceService):
    __slots__ = ()

    async def view_outcomes(self, options: ViewOutcomesOptions | Mapping[str, Any]) -> Any:
        """Consulta outcomes: app_id primeiro, outcome_names separados por vírgula."""
        params = view_outcomes_params(self.app_id, options)
        return await self._gateway.execute(HttpMethod.GET, OUTCOMES_PATH, params=params)
