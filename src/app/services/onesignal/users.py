"""Serviço de usuários, identidades e eventos customizados."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from api.connectors.onesignal.endpoints import app_path, quote_segment, user_alias_path
from api.connectors.onesignal.models import HttpMethod
from api.validators.onesignal import (
    require_identifier,
    validate_create_user,
    validate_custom_events,
    validate_update_user,
)
from app.services.onesignal.base import OneSignalResourceService


class UsersService(OneSignalResourceService):
    """Operações sobre /apps/{app_id}/users.

    Usuários são endereçados por alias (label + id), ex: external_id/abc.
    """

    __slots__ = ()

    def _user_path(self, alias_label: str, alias_id: str, suffix: str = "") -> str:
        require_identifier(alias_label, "alias_label")
        require_identifier(alias_id, "alias_id")
        return user_alias_path(self.app_id, alias_label, alias_id) + suffix

    async def create_user(self, user: Mapping[str, Any]) -> Any:
        """Cria usuário. Exige identity.external_id."""
        validate_create_user(user)
        return await self._gateway.execute(
            HttpMethod.POST,
            app_path(self.app_id, "/users"),
            dict(user),
        )

    async def view_user(self, alias_label: str, alias_id: str) -> Any:
        return await self._gateway.execute(
            HttpMethod.GET,
            self._user_path(alias_label, alias_id),
        )

    async def update_user(
        self,
        alias_label: str,
        alias_id: str,
        update: Mapping[str, Any],
    ) -> Any:
        """Atualiza properties e/ou deltas do usuário."""
        path = self._user_path(alias_label, alias_id)
        validate_update_user(update)
        return await self._gateway.execute(HttpMethod.PATCH, path, dict(update))

    async def delete_user(self, alias_label: str, alias_id: str) -> Any:
        return await self._gateway.execute(
            HttpMethod.DELETE,
            self._user_path(alias_label, alias_id),
        )

    async def view_user_identity(self, alias_label: str, alias_id: str) -> Any:
        """Lista todos os aliases do usuário."""
        return await self._gateway.execute(
            HttpMethod.GET,
            self._user_path(alias_label, alias_id, "/identity"),
        )

    async def view_user_identity_by_subscription(self, subscription_id: str) -> Any:
        """Aliases do usuário dono da subscription."""
        require_identifier(subscription_id, "subscription_id")
        path = app_path(
            self.app_id,
            f"/subscriptions/{quote_segment(subscription_id)}/user/identity",
        )
        return await self._gateway.execute(HttpMethod.GET, path)

    async def create_custom_events(self, events: Sequence[Mapping[str, Any]]) -> Any:
        """Registra lote de eventos customizados.

        Args:
            events: Eventos com name e external_id ou onesignal_id

        Raises:
            ValidationError: Lote vazio ou evento incompleto
        """
        validate_custom_events(events)
        return await self._gateway.execute(
            HttpMethod.POST,
            app_path(self.app_id, "/integrations/custom_events"),
            {"events": [dict(event) for event in events]},
        )
