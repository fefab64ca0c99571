"""Agregador de settings do wapi_gateway.

Re-exporta settings e getters de cada módulo.
"""

from __future__ import annotations

from wapi_gateway.config.settings.server import (
    Environment,
    ServerSettings,
    get_server_settings,
)
from wapi_gateway.config.settings.wapi import (
    API_VERSION_PATH,
    DEFAULT_API_HOST,
    DEFAULT_PHONE_SUFFIX,
    DEFAULT_PROXY_BASE_URL,
    WapiSettings,
    get_wapi_settings,
)

__all__ = [
    "API_VERSION_PATH",
    "DEFAULT_API_HOST",
    "DEFAULT_PHONE_SUFFIX",
    "DEFAULT_PROXY_BASE_URL",
    "Environment",
    "ServerSettings",
    "WapiSettings",
    "get_server_settings",
    "get_wapi_settings",
]
