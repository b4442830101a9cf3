"""Testes do gateway de transporte OneSignal (httpx mockado)."""

from __future__ import annotations

import dataclasses
import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from api.connectors.onesignal import (
    HttpMethod,
    OneSignalHttpClient,
    create_onesignal_http_client,
)
from api.connectors.onesignal.http_base import HttpClientConfig
from config.settings import OneSignalSettings
from utils.errors import TransportError, UnknownError, ValidationError

BASE = "https://api.onesignal.com"


def _settings(**overrides: object) -> OneSignalSettings:
    data: dict[str, object] = {"app_id": "A1", "api_key": "K1"}
    data.update(overrides)
    return OneSignalSettings(**data)  # type: ignore[arg-type]


def _response(
    method: str,
    url: str,
    status_code: int = 200,
    **kwargs: object,
) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request(method, url), **kwargs)


def _mock_http() -> AsyncMock:
    return AsyncMock(spec=httpx.AsyncClient)


class TestBuildEnvelope:
    """Montagem do envelope (sem IO)."""

    def test_headers_and_timeout(self) -> None:
        """Authorization Basic + JSON e timeout de 10 s por padrão."""
        gateway = OneSignalHttpClient(_settings())

        envelope = gateway.build_envelope("post", "/notifications?c=push", {"a": 1})

        assert envelope.method is HttpMethod.POST
        assert envelope.headers == {
            "Content-Type": "application/json",
            "Authorization": "Basic K1",
        }
        assert envelope.timeout_seconds == 10.0
        assert envelope.url == f"{BASE}/notifications?c=push"
        assert envelope.endpoint == "/notifications"

    def test_params_appended_in_order_and_none_dropped(self) -> None:
        gateway = OneSignalHttpClient(_settings())

        envelope = gateway.build_envelope(
            HttpMethod.GET,
            "/notifications?c=messages",
            params={"app_id": "A1", "limit": "10", "kind": None},
        )

        assert envelope.url == f"{BASE}/notifications?c=messages&app_id=A1&limit=10"

    def test_query_values_are_percent_encoded(self) -> None:
        gateway = OneSignalHttpClient(_settings())

        envelope = gateway.build_envelope(
            HttpMethod.GET,
            "/outcomes",
            params={"app_id": "A 1", "outcome_names": "os__click.count,purchase"},
        )

        assert envelope.url == (
            f"{BASE}/outcomes?app_id=A%201&outcome_names=os__click.count%2Cpurchase"
        )

    def test_unknown_method_raises(self) -> None:
        gateway = OneSignalHttpClient(_settings())

        with pytest.raises(ValidationError, match="unsupported HTTP method"):
            gateway.build_envelope("TRACE", "/apps/A1")

    @pytest.mark.parametrize("method", [HttpMethod.GET, HttpMethod.DELETE])
    def test_body_on_bodyless_method_raises(self, method: HttpMethod) -> None:
        gateway = OneSignalHttpClient(_settings())

        with pytest.raises(ValidationError, match="do not take a body"):
            gateway.build_envelope(method, "/apps/A1", {"x": 1})

    def test_app_id_exposed(self) -> None:
        assert OneSignalHttpClient(_settings(app_id="app-9")).app_id == "app-9"


class TestExecuteSuccess:
    """Chamadas bem-sucedidas devolvem o JSON sem alterações."""

    @pytest.mark.asyncio
    async def test_post_sends_body_and_returns_json(self) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/notifications?c=push"
        mock_http.post.return_value = _response(
            "POST", url, json={"id": "n1", "external_id": None}
        )
        gateway = OneSignalHttpClient(_settings(), mock_http)

        result = await gateway.execute(HttpMethod.POST, "/notifications?c=push", {"a": 1})

        assert result == {"id": "n1", "external_id": None}
        mock_http.post.assert_awaited_once_with(
            url,
            json={"a": 1},
            headers={"Content-Type": "application/json", "Authorization": "Basic K1"},
            timeout=10.0,
        )

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, json={"id": "A1"})
        gateway = OneSignalHttpClient(_settings(request_timeout_ms=2500), mock_http)

        result = await gateway.execute("GET", "/apps/A1")

        assert result == {"id": "A1"}
        args, kwargs = mock_http.get.call_args
        assert args == (url,)
        assert "json" not in kwargs
        assert kwargs["timeout"] == 2.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "attr"),
        [(HttpMethod.PUT, "put"), (HttpMethod.PATCH, "patch")],
    )
    async def test_put_and_patch_dispatch(self, method: HttpMethod, attr: str) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/players/s1"
        getattr(mock_http, attr).return_value = _response(str(method), url, json={"success": True})
        gateway = OneSignalHttpClient(_settings(), mock_http)

        result = await gateway.execute(method, "/players/s1", {"tags": {"a": "1"}})

        assert result == {"success": True}
        getattr(mock_http, attr).assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_with_empty_body_returns_none(self) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/players/s1?app_id=A1"
        mock_http.delete.return_value = _response("DELETE", url, status_code=204)
        gateway = OneSignalHttpClient(_settings(), mock_http)

        result = await gateway.execute(HttpMethod.DELETE, "/players/s1", params={"app_id": "A1"})

        assert result is None
        mock_http.delete.assert_awaited_once()
        assert mock_http.delete.call_args.args == (url,)

    @pytest.mark.asyncio
    async def test_non_json_body_returned_as_text(self) -> None:
        """Corpo 2xx que não é JSON volta como texto, sem erro."""
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, text="<html>ok</html>")
        gateway = OneSignalHttpClient(_settings(), mock_http)

        result = await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert result == "<html>ok</html>"

    @pytest.mark.asyncio
    async def test_shared_client_receives_envelope_headers_and_timeout(self) -> None:
        """Headers e timeout saem do envelope, também com cliente compartilhado."""
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, json={})
        gateway = OneSignalHttpClient(_settings(request_timeout_ms=1500), mock_http)

        await gateway.execute(HttpMethod.GET, "/apps/A1")

        kwargs = mock_http.get.call_args.kwargs
        assert kwargs["headers"] == {
            "Content-Type": "application/json",
            "Authorization": "Basic K1",
        }
        assert kwargs["timeout"] == 1.5

    @pytest.mark.asyncio
    async def test_records_latency_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        """Toda chamada gera um log metric_latency com o endpoint sem query."""
        mock_http = _mock_http()
        mock_http.get.return_value = _response("GET", f"{BASE}/apps/A1", json={})
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        metrics = [r for r in caplog.records if r.getMessage() == "metric_latency"]
        assert len(metrics) == 1
        assert metrics[0].operation == "GET /apps/A1"
        assert metrics[0].outcome == "success"
        assert metrics[0].component == "onesignal_gateway"


class TestExecuteErrors:
    """Classificação de falhas em TransportError / UnknownError."""

    @pytest.mark.asyncio
    async def test_status_error_uses_errors_member(self) -> None:
        """400 com {"errors": ["bad"]} vira TransportError com a mensagem do upstream."""
        mock_http = _mock_http()
        url = f"{BASE}/notifications?c=push"
        mock_http.post.return_value = _response("POST", url, 400, json={"errors": ["bad"]})
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(TransportError) as exc_info:
            await gateway.execute(HttpMethod.POST, "/notifications?c=push", {"a": 1})

        assert str(exc_info.value) == 'OneSignal API error: ["bad"]'
        assert exc_info.value.status_code == 400
        assert exc_info.value.details == ["bad"]

    @pytest.mark.asyncio
    async def test_status_error_without_errors_member_uses_body(self) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, 404, json={"message": "not found"})
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(TransportError) as exc_info:
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"message": "not found"}
        assert str(exc_info.value) == 'OneSignal API error: {"message": "not found"}'

    @pytest.mark.asyncio
    async def test_status_error_with_text_body(self) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, 502, text="Bad Gateway")
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(TransportError) as exc_info:
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert exc_info.value.status_code == 502
        assert exc_info.value.details == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error_without_status(self) -> None:
        mock_http = _mock_http()
        mock_http.get.side_effect = httpx.ReadTimeout("timed out")
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(TransportError) as exc_info:
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert exc_info.value.status_code is None
        assert "timed out" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_connection_error_becomes_transport_error(self) -> None:
        mock_http = _mock_http()
        mock_http.post.side_effect = httpx.ConnectError("connection refused")
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(TransportError, match="connection refused"):
            await gateway.execute(HttpMethod.POST, "/players", {"app_id": "A1"})

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_unknown_error(self) -> None:
        mock_http = _mock_http()
        mock_http.get.side_effect = RuntimeError("boom")
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(UnknownError) as exc_info:
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert "RuntimeError" in exc_info.value.cause
        assert "boom" in exc_info.value.cause

    @pytest.mark.asyncio
    async def test_validation_error_happens_before_io(self) -> None:
        mock_http = _mock_http()
        gateway = OneSignalHttpClient(_settings(), mock_http)

        with pytest.raises(ValidationError):
            await gateway.execute(HttpMethod.GET, "/apps/A1", {"x": 1})

        mock_http.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_log_never_contains_api_key(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mock_http = _mock_http()
        url = f"{BASE}/apps/A1"
        mock_http.get.return_value = _response("GET", url, 401, json={"errors": ["denied"]})
        gateway = OneSignalHttpClient(_settings(api_key="super-secret"), mock_http)

        with caplog.at_level(logging.DEBUG), pytest.raises(TransportError):
            await gateway.execute(HttpMethod.GET, "/apps/A1")

        assert "super-secret" not in caplog.text
        assert any(r.getMessage() == "onesignal_api_error" for r in caplog.records)


class TestLifecycle:
    """Cliente compartilhado e context manager."""

    @pytest.mark.asyncio
    async def test_context_manager_closes_injected_client(self) -> None:
        mock_http = _mock_http()

        async with OneSignalHttpClient(_settings(), mock_http) as gateway:
            assert gateway.app_id == "A1"

        mock_http.aclose.assert_awaited_once()

    def test_base_config_only_carries_tls_flag(self) -> None:
        """Timeout e headers não ficam duplicados na config base."""
        assert [f.name for f in dataclasses.fields(HttpClientConfig)] == ["verify_ssl"]
        assert HttpClientConfig().verify_ssl is True

    def test_factory_uses_given_settings(self) -> None:
        gateway = create_onesignal_http_client(_settings(app_id="A7"))

        assert isinstance(gateway, OneSignalHttpClient)
        assert gateway.app_id == "A7"
