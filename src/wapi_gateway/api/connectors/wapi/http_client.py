"""Cliente HTTP da W-API (modo direto).

Monta e executa uma requisição por operação lógica:
- URL: https://{api_host}/v1{endpoint}?instanceId={instance_id}
- Header Authorization Bearer + JSON
- GET: parâmetros na query string; demais métodos: corpo JSON
- Sem retries: toda falha sobe classificada para o chamador
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


class WapiHttpClient:
    """Transporte HTTP async até a W-API.

    Um httpx.AsyncClient injetado não é fechado por aclose(); o criado
    internamente é.
    """

    def __init__(
        self,
        settings: WapiSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not settings.api_token or not settings.api_token.strip():
            raise ConfigError(["WAPI_API_TOKEN não configurado"])
        if not settings.instance_id:
            raise ConfigError(["WAPI_INSTANCE_ID não configurado"])

        self._settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def build_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> tuple[str, dict[str, str], dict[str, Any], dict[str, Any] | None]:
        """Monta (url, headers, query, body) para uma operação.

        Args:
            method: Método HTTP
            endpoint: Endpoint lógico iniciado por "/" (ex: /message/send-text)
            params: Parâmetros da operação

        Returns:
            Tupla (url, headers, query, body). body é None para GET/DELETE.
        """
        url = f"{self._settings.base_url}{endpoint}"
        headers = {
            "Authorization": f"Bearer {self._settings.api_token}",
            **JSON_HEADERS,
        }
        query: dict[str, Any] = {"instanceId": self._settings.instance_id}
        body: dict[str, Any] | None = None

        if method.upper() in QUERY_METHODS:
            query.update({k: v for k, v in (params or {}).items() if v is not None})
        else:
            body = dict(params or {})
        return url, headers, query, body

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Executa a requisição e devolve o JSON decodificado.

        Raises:
            RemoteError: W-API respondeu com status não-2xx
            WapiConnectionError: nenhuma resposta utilizável recebida
        """
        url, headers, query, body = self.build_request(method, endpoint, params)
        return await send_request(
            self._client,
            method,
            endpoint,
            url,
            query=query,
            body=body,
            headers=headers,
            timeout=self._settings.request_timeout_seconds,
        )

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient quando criado por esta instância."""
        if self._owns_client:
            await self._client.aclose()
