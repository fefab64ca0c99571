"""wapi_gateway: cliente, serviço e proxy HTTP para a W-API (WhatsApp).

Uso:
    from wapi_gateway import WapiSettings, create_wapi_service

    settings = WapiSettings(instance_id="...", api_token="...")
    async with create_wapi_service(settings) as service:
        await service.send_text("5511999999999@c.us", "Olá")
"""

from wapi_gateway.api.aliases import WA_ALIASES, call_alias
from wapi_gateway.app.bootstrap.wapi_factory import create_wapi_service
from wapi_gateway.app.services import (
    ConnectionState,
    EventBus,
    EventType,
    ServiceEvent,
    WapiService,
)
from wapi_gateway.config.settings import WapiSettings
from wapi_gateway.utils.errors import (
    ConfigError,
    RateLimitedError,
    RemoteError,
    WapiConnectionError,
    WapiError,
)

__version__ = "1.0.0"

__all__ = [
    "WA_ALIASES",
    "ConfigError",
    "ConnectionState",
    "EventBus",
    "EventType",
    "RateLimitedError",
    "RemoteError",
    "ServiceEvent",
    "WapiConnectionError",
    "WapiError",
    "WapiService",
    "WapiSettings",
    "call_alias",
    "create_wapi_service",
]
