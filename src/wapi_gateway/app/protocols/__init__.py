"""Protocolos e contratos do core da aplicação."""

from .cache import ResponseCacheProtocol
from .transport import WapiTransportProtocol

__all__ = [
    "ResponseCacheProtocol",
    "WapiTransportProtocol",
]
