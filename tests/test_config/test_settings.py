"""Testes de carregamento e validação das settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wapi_gateway.config.settings import (
    ServerSettings,
    WapiSettings,
    get_server_settings,
    get_wapi_settings,
)

_WAPI_ENV = (
    "WAPI_API_HOST",
    "WAPI_INSTANCE_ID",
    "WAPI_API_TOKEN",
    "WAPI_CACHE_ENABLED",
    "WAPI_CACHE_TTL_SECONDS",
    "WAPI_CACHE_MAX_ENTRIES",
    "WAPI_RATE_LIMIT_PER_MINUTE",
    "WAPI_HEALTH_CHECK_ENABLED",
    "WAPI_HEALTH_CHECK_INTERVAL_MS",
    "WAPI_NORMALIZE_PHONES",
    "WAPI_DIRECT_MODE",
    "WAPI_PROXY_BASE_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _WAPI_ENV:
        monkeypatch.delenv(name, raising=False)
    get_wapi_settings.cache_clear()
    get_server_settings.cache_clear()
    yield
    get_wapi_settings.cache_clear()
    get_server_settings.cache_clear()


class TestWapiSettings:
    def test_defaults(self) -> None:
        settings = get_wapi_settings()

        assert settings.api_host == "api.w-api.app"
        assert settings.base_url == "https://api.w-api.app/v1"
        assert settings.cache_enabled is True
        assert settings.cache_ttl_seconds == 300
        assert settings.rate_limit_per_minute == 60
        assert settings.health_check_interval_ms == 60_000
        assert settings.normalize_phones is False
        assert settings.direct_mode is True
        assert settings.proxy_base_url == "http://localhost:3000"

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAPI_API_HOST", "api.example.test")
        monkeypatch.setenv("WAPI_INSTANCE_ID", "INST")
        monkeypatch.setenv("WAPI_API_TOKEN", "tok")
        monkeypatch.setenv("WAPI_CACHE_ENABLED", "false")
        monkeypatch.setenv("WAPI_RATE_LIMIT_PER_MINUTE", "10")
        monkeypatch.setenv("WAPI_NORMALIZE_PHONES", "1")

        settings = get_wapi_settings()

        assert settings.base_url == "https://api.example.test/v1"
        assert settings.instance_id == "INST"
        assert settings.cache_enabled is False
        assert settings.rate_limit_per_minute == 10
        assert settings.normalize_phones is True
        assert settings.validate() == []

    def test_getter_is_cached(self) -> None:
        assert get_wapi_settings() is get_wapi_settings()

    def test_validate_reports_missing_credentials(self) -> None:
        errors = WapiSettings().validate()

        assert "WAPI_INSTANCE_ID não configurado" in errors
        assert "WAPI_API_TOKEN não configurado" in errors

    def test_validate_rejects_negative_limits(self) -> None:
        settings = WapiSettings(
            instance_id="i",
            api_token="t",
            rate_limit_per_minute=-1,
            cache_max_entries=-5,
            health_check_interval_ms=0,
        )

        errors = settings.validate()

        assert len(errors) == 3

    def test_zero_rate_limit_is_valid(self) -> None:
        assert WapiSettings(instance_id="i", api_token="t", rate_limit_per_minute=0).validate() == []

    def test_local_mode_needs_no_credentials(self) -> None:
        assert WapiSettings(direct_mode=False).validate() == []

    def test_local_mode_rejects_url_without_scheme(self) -> None:
        errors = WapiSettings(direct_mode=False, proxy_base_url="localhost:3000").validate()

        assert errors == ["WAPI_PROXY_BASE_URL deve começar com http:// ou https://"]

    def test_local_mode_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAPI_DIRECT_MODE", "false")
        monkeypatch.setenv("WAPI_PROXY_BASE_URL", "http://gateway.interno:8080")

        settings = get_wapi_settings()

        assert settings.direct_mode is False
        assert settings.proxy_base_url == "http://gateway.interno:8080"
        assert settings.validate() == []


class TestServerSettings:
    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("WAPI_SERVER_PORT", "8080")

        server = get_server_settings()

        assert server.environment == "production"
        assert server.is_production is True
        assert server.port == 8080

    def test_invalid_port(self) -> None:
        assert ServerSettings(port=0).validate() == ["WAPI_SERVER_PORT inválida: 0"]
