"""Serviço de segmentos."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api.connectors.onesignal.endpoints import app_path, quote_segment
from api.connectors.onesignal.models import HttpMethod
from api.payload_builders.onesignal import pagination_params
from api.validators.onesignal import (
    require_identifier,
    validate_create_segment,
    validate_update_segment,
)
from app.constants.onesignal import DEFAULT_SEGMENTS_LIMIT, DEFAULT_SEGMENTS_OFFSET
from app.domain.audience import render_filters
from app.services.onesignal.base import OneSignalResourceService


def _segment_body(segment: Mapping[str, Any]) -> dict[str, Any]:
    body = dict(segment)
    if body.get("filters"):
        body["filters"] = render_filters(body["filters"])
    return body


class SegmentsService(OneSignalResourceService):
    """Operações sobre /apps/{app_id}/segments.

    Filtros podem ser instâncias de Filter ou mappings no formato da API.
    """

    __slots__ = ()

    def _segment_path(self, segment_id: str) -> str:
        require_identifier(segment_id, "segment_id")
        return app_path(self.app_id, f"/segments/{quote_segment(segment_id)}")

    async def create_segment(self, segment: Mapping[str, Any]) -> Any:
        validate_create_segment(segment)
        return await self._gateway.execute(
            HttpMethod.POST,
            app_path(self.app_id, "/segments"),
            _segment_body(segment),
        )

    async def view_segments(
        self,
        limit: int = DEFAULT_SEGMENTS_LIMIT,
        offset: int = DEFAULT_SEGMENTS_OFFSET,
    ) -> Any:
        """Lista segmentos paginados (padrão: 50 a partir de 0)."""
        return await self._gateway.execute(
            HttpMethod.GET,
            app_path(self.app_id, "/segments"),
            params=pagination_params(limit, offset),
        )

    async def view_segment(self, segment_id: str) -> Any:
        return await self._gateway.execute(HttpMethod.GET, self._segment_path(segment_id))

    async def update_segment(self, segment_id: str, update: Mapping[str, Any]) -> Any:
        path = self._segment_path(segment_id)
        validate_update_segment(update)
        return await self._gateway.execute(HttpMethod.PATCH, path, _segment_body(update))

    async def delete_segment(self, segment_id: str) -> Any:
        return await self._gateway.execute(HttpMethod.DELETE, self._segment_path(segment_id))
