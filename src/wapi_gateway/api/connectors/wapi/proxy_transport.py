"""Transporte via proxy local (modo local).

Envia cada operação ao proxy HTTP deste pacote em `proxy_base_url`. O
proxy detém token e instanceId e fala com a W-API; daqui não sai
credencial nenhuma.

- GET/DELETE: parâmetros na query string
- demais métodos: corpo JSON
- erro do proxy (500 `{"success": false, "error": ...}`) vira RemoteError
  com o corpo como veio
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from wapi_gateway.api.connectors.wapi.http_base import (
    JSON_HEADERS,
    QUERY_METHODS,
    send_request,
)
from wapi_gateway.utils.errors import ConfigError

if TYPE_CHECKING:
    from wapi_gateway.config.settings import WapiSettings

# Rotas do proxy com nome diferente do endpoint da W-API
PROXY_ROUTES: dict[str, str] = {
    "/instance/device": "/instance/status",
}


class WapiProxyTransport:
    """Transporte até o proxy local; mesma interface de WapiHttpClient."""

    def __init__(
        self,
        settings: WapiSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not settings.proxy_base_url or not settings.proxy_base_url.strip():
            raise ConfigError(["WAPI_PROXY_BASE_URL não configurado"])

        self._settings = settings
        self._base_url = settings.proxy_base_url.strip().rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[str, dict[str, Any], dict[str, Any] | None]:
        """Monta (url, query, body) para a rota equivalente do proxy."""
        url = f"{self._base_url}{PROXY_ROUTES.get(endpoint, endpoint)}"
        if method.upper() in QUERY_METHODS:
            query = {k: v for k, v in (params or {}).items() if v is not None}
            return url, query, None
        return url, {}, dict(params or {})

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        url, query, body = self.build_request(method, endpoint, params)
        return await send_request(
            self._client,
            method,
            endpoint,
            url,
            query=query,
            body=body,
            headers=dict(JSON_HEADERS),
            timeout=self._settings.request_timeout_seconds,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
