"""Factory de wiring do serviço W-API (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wapi_gateway.app.services.wapi_service import WapiService
from wapi_gateway.utils.errors import ConfigError

if TYPE_CHECKING:
    import httpx

    from wapi_gateway.app.services.events import EventBus
    from wapi_gateway.config.settings import WapiSettings


def create_wapi_service(
    settings: WapiSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    events: EventBus | None = None,
) -> WapiService:
    """Cria WapiService com o transporte HTTP concreto.

    `direct_mode` escolhe o transporte: WapiHttpClient (W-API) ou
    WapiProxyTransport (proxy local em `proxy_base_url`).

    Args:
        settings: WapiSettings; carregadas do ambiente se None.
        http_client: httpx.AsyncClient externo (não fechado no shutdown).
        events: Barramento de eventos compartilhado.

    Raises:
        ConfigError: Settings inválidas, antes de qualquer atividade de rede.
    """
    # Import local: bootstrap é o único ponto que conhece a camada api
    from wapi_gateway.api.connectors.wapi import WapiHttpClient, WapiProxyTransport
    from wapi_gateway.config.settings import get_wapi_settings

    wapi = settings or get_wapi_settings()
    errors = wapi.validate()
    if errors:
        raise ConfigError(errors)

    if wapi.direct_mode:
        transport = WapiHttpClient(wapi, http_client=http_client)
    else:
        transport = WapiProxyTransport(wapi, http_client=http_client)
    return WapiService(wapi, transport, events=events)
