"""Testes ponta a ponta do proxy HTTP contra a W-API falsa."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from wapi_gateway.app.app import create_app
from wapi_gateway.app.bootstrap import create_wapi_service
from tests.fakes.fake_wapi_api import TEST_SETTINGS, FakeWapiApi


@pytest.fixture
def client(fake_api: FakeWapiApi) -> Iterator[TestClient]:
    def _factory():
        return create_wapi_service(TEST_SETTINGS, http_client=fake_api.client())

    with TestClient(create_app(service_factory=_factory)) as test_client:
        yield test_client


class TestDescribeAndHealth:
    def test_root_lists_endpoint_groups(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        payload = response.json()
        assert set(payload["endpoints"]) == {"instance", "message", "contacts", "chats", "groups"}
        assert "/message/send-text" in payload["endpoints"]["message"]

    def test_health_reports_last_known_state(
        self, client: TestClient, fake_api: FakeWapiApi
    ) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "healthy"
        assert payload["instance"]["connected"] is False
        assert fake_api.requests == []

    def test_correlation_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Correlation-ID": "corr-42"})

        assert response.headers["X-Correlation-ID"] == "corr-42"


class TestPassThrough:
    def test_status_returns_vendor_json_verbatim(
        self, client: TestClient, fake_api: FakeWapiApi
    ) -> None:
        fake_api.respond("GET", "/v1/instance/device", {"connected": True, "phone": "5511"})

        response = client.get("/instance/status")

        assert response.status_code == 200
        assert response.json() == {"connected": True, "phone": "5511"}

    def test_send_text_forwards_body(self, client: TestClient, fake_api: FakeWapiApi) -> None:
        fake_api.respond("POST", "/v1/message/send-text", {"messageId": "XYZ"})

        response = client.post(
            "/message/send-text",
            json={"phone": "5511999999999@c.us", "message": "Hi"},
        )

        assert response.status_code == 200
        assert response.json() == {"messageId": "XYZ"}
        assert fake_api.last_json() == {
            "phone": "5511999999999@c.us",
            "message": "Hi",
            "options": {},
        }

    def test_send_list_accepts_list_field(
        self, client: TestClient, fake_api: FakeWapiApi
    ) -> None:
        response = client.post(
            "/message/send-list",
            json={"phone": "1@c.us", "message": "Menu", "list": {"sections": []}},
        )

        assert response.status_code == 200
        assert fake_api.last_json()["list"] == {"sections": []}

    def test_contact_query_parameter(self, client: TestClient, fake_api: FakeWapiApi) -> None:
        client.get("/contacts/check", params={"phone": "5511999999999@c.us"})

        request = fake_api.last_request
        assert request.url.path == "/v1/contacts/check"
        assert request.url.params["phone"] == "5511999999999@c.us"

    def test_group_participants_route(self, client: TestClient, fake_api: FakeWapiApi) -> None:
        response = client.post(
            "/groups/update-participants",
            json={"groupId": "G@g.us", "participants": ["1@c.us"], "action": "add"},
        )

        assert response.status_code == 200
        assert fake_api.last_json()["groupId"] == "G@g.us"


class TestErrors:
    def test_remote_error_becomes_500(self, client: TestClient, fake_api: FakeWapiApi) -> None:
        fake_api.respond("GET", "/v1/chats/get-all", {"message": "Unauthorized"}, 401)

        response = client.get("/chats/get-all")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": {"message": "Unauthorized"}}

    def test_rate_limited_becomes_500(self, fake_api: FakeWapiApi) -> None:
        settings = dataclasses.replace(TEST_SETTINGS, rate_limit_per_minute=1)

        def _factory():
            return create_wapi_service(settings, http_client=fake_api.client())

        with TestClient(create_app(service_factory=_factory)) as limited:
            assert limited.post("/instance/connect").status_code == 200
            response = limited.post("/instance/connect")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["kind"] == "rate_limited"
        assert error["retryAfterMs"] > 0

    def test_missing_required_field_becomes_500(
        self, client: TestClient, fake_api: FakeWapiApi
    ) -> None:
        response = client.post("/message/send-text", json={"phone": "1@c.us"})

        assert response.status_code == 500
        payload = response.json()
        assert payload["success"] is False
        assert payload["error"]["kind"] == "validation_error"
        assert fake_api.requests == []

    def test_uninitialized_service_returns_json_error(self, fake_api: FakeWapiApi) -> None:
        def _factory():
            return create_wapi_service(TEST_SETTINGS, http_client=fake_api.client())

        # Sem o bloco `with` o lifespan não roda e app.state fica sem serviço
        bare = TestClient(create_app(service_factory=_factory), raise_server_exceptions=False)

        response = bare.get("/instance/status")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"kind": "RuntimeError", "message": "WapiService não inicializado"},
        }
        assert fake_api.requests == []
