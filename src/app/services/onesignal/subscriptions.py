"""Serviço de subscriptions (dispositivos / players)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.connectors.onesignal.endpoints import PLAYERS_PATH, player_path
from api.connectors.onesignal.models import HttpMethod
from api.validators.onesignal import require_identifier, require_mapping
from app.constants.onesignal import APP_ID_FIELD
from app.services.onesignal.base import OneSignalResourceService


class SubscriptionsService(OneSignalResourceService):
    """Operações sobre /players.

    Update e delete levam app_id na query: todo caminho mutável identifica
    a aplicação e o recurso.
    """

    __slots__ = ()

    def _with_app_id(self, data: Mapping[str, Any]) -> dict[str, Any]:
        require_mapping(data, "subscription input")
        return {**data, APP_ID_FIELD: self.app_id}

    async def create_subscription(self, subscription: Mapping[str, Any]) -> Any:
        return await self._gateway.execute(
            HttpMethod.POST,
            PLAYERS_PATH,
            self._with_app_id(subscription),
        )

    async def view_subscription(self, subscription_id: str) -> Any:
        require_identifier(subscription_id, "subscription_id")
        return await self._gateway.execute(HttpMethod.GET, player_path(subscription_id))

    async def update_subscription(
        self,
        subscription_id: str,
        update: Mapping[str, Any],
    ) -> Any:
        require_identifier(subscription_id, "subscription_id")
        return await self._gateway.execute(
            HttpMethod.PUT,
            player_path(subscription_id),
            self._with_app_id(update),
            params={APP_ID_FIELD: self.app_id},
        )

    async def delete_subscription(self, subscription_id: str) -> Any:
        require_identifier(subscription_id, "subscription_id")
        return await self._gateway.execute(
            HttpMethod.DELETE,
            player_path(subscription_id),
            params={APP_ID_FIELD: self.app_id},
        )
