"""Serviço de metadados da aplicação."""

from __future__ import annotations

from typing import Any

from api.connectors.onesignal.endpoints import app_path
from api.connectors.onesignal.models import HttpMethod
from app.services.onesignal.base import OneSignalResourceService


class AppsService(OneSignalResourceService):
    __slots__ = ()

    async def view_app(self) -> Any:
        """Retorna a configuração da aplicação configurada."""
        return await self._gateway.execute(HttpMethod.GET, app_path(self.app_id))
