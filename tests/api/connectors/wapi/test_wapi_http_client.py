"""Testes do cliente HTTP da W-API."""

from __future__ import annotations

import dataclasses

import httpx
import pytest

from wapi_gateway.api.connectors.wapi import WapiHttpClient
from wapi_gateway.utils.errors import ConfigError, RemoteError, WapiConnectionError
from tests.fakes.fake_wapi_api import TEST_SETTINGS, FakeWapiApi


class TestBuildRequest:
    """Testes da montagem de URL, headers e corpo."""

    def test_post_builds_url_headers_and_body(self) -> None:
        client = WapiHttpClient(TEST_SETTINGS, http_client=httpx.AsyncClient())
        url, headers, query, body = client.build_request(
            "post", "/message/send-text", {"phone": "1", "message": "oi"}
        )

        assert url == "https://api.test.local/v1/message/send-text"
        assert headers["Authorization"] == "Bearer token-abc"
        assert headers["Content-Type"] == "application/json"
        assert query == {"instanceId": "INST-123"}
        assert body == {"phone": "1", "message": "oi"}

    def test_get_sends_params_in_query(self) -> None:
        client = WapiHttpClient(TEST_SETTINGS, http_client=httpx.AsyncClient())
        _, _, query, body = client.build_request("GET", "/contacts/get", {"phone": "55"})

        assert query == {"instanceId": "INST-123", "phone": "55"}
        assert body is None

    def test_post_without_params_sends_empty_object(self) -> None:
        client = WapiHttpClient(TEST_SETTINGS, http_client=httpx.AsyncClient())
        _, _, _, body = client.build_request("POST", "/instance/connect")
        assert body == {}

    def test_missing_token_raises_config_error(self) -> None:
        settings = dataclasses.replace(TEST_SETTINGS, api_token="  ")
        with pytest.raises(ConfigError):
            WapiHttpClient(settings)


class TestRequest:
    """Testes de request() contra a W-API falsa."""

    @pytest.mark.asyncio
    async def test_returns_decoded_json(self, fake_api: FakeWapiApi) -> None:
        fake_api.respond("GET", "/v1/instance/device", {"connected": True})
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        result = await client.request("GET", "/instance/device")

        assert result == {"connected": True}
        request = fake_api.last_request
        assert request.url.params["instanceId"] == "INST-123"
        assert request.headers["authorization"] == "Bearer token-abc"

    @pytest.mark.asyncio
    async def test_non_success_status_raises_remote_error(self, fake_api: FakeWapiApi) -> None:
        fake_api.respond("GET", "/v1/instance/device", {"message": "Unauthorized"}, 401)
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        with pytest.raises(RemoteError) as exc_info:
            await client.request("GET", "/instance/device")

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == {"message": "Unauthorized"}
        assert "401" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_error_body_kept_as_text(self, fake_api: FakeWapiApi) -> None:
        fake_api.respond("POST", "/v1/instance/restart", "Bad Gateway", 502)
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        with pytest.raises(RemoteError) as exc_info:
            await client.request("POST", "/instance/restart")

        assert exc_info.value.body == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_transport_failure_raises_connection_error(self, fake_api: FakeWapiApi) -> None:
        fake_api.fail_with("GET", "/v1/chats/get-all", httpx.ConnectError("recusado"))
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        with pytest.raises(WapiConnectionError):
            await client.request("GET", "/chats/get-all")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [httpx.DecodingError("gzip corrompido"), httpx.TooManyRedirects("loop")],
    )
    async def test_any_request_error_is_classified(
        self, fake_api: FakeWapiApi, exc: httpx.RequestError
    ) -> None:
        """Falhas de httpx fora de TransportError também viram WapiConnectionError."""
        fake_api.fail_with("GET", "/v1/contacts/get-all", exc)
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        with pytest.raises(WapiConnectionError, match=type(exc).__name__):
            await client.request("GET", "/contacts/get-all")

    @pytest.mark.asyncio
    async def test_timeout_raises_connection_error(self, fake_api: FakeWapiApi) -> None:
        fake_api.fail_with("GET", "/v1/chats/get-all", httpx.ReadTimeout("lento"))
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        with pytest.raises(WapiConnectionError, match="timeout"):
            await client.request("GET", "/chats/get-all")

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, fake_api: FakeWapiApi) -> None:
        fake_api.respond("POST", "/v1/instance/logout", None, 204)
        client = WapiHttpClient(TEST_SETTINGS, http_client=fake_api.client())

        assert await client.request("POST", "/instance/logout") is None

    @pytest.mark.asyncio
    async def test_aclose_keeps_injected_client_open(self, fake_api: FakeWapiApi) -> None:
        http_client = fake_api.client()
        client = WapiHttpClient(TEST_SETTINGS, http_client=http_client)

        await client.aclose()

        assert http_client.is_closed is False
        await http_client.aclose()
