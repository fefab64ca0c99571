"""Conectores HTTP da W-API: direto (WapiHttpClient) e via proxy local."""

from wapi_gateway.api.connectors.wapi.http_client import WapiHttpClient
from wapi_gateway.api.connectors.wapi.proxy_transport import WapiProxyTransport

__all__ = ["WapiHttpClient", "WapiProxyTransport"]
