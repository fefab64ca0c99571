"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigError,
    RateLimitedError,
    RemoteError,
    WapiConnectionError,
    WapiError,
)

__all__ = [
    "ConfigError",
    "RateLimitedError",
    "RemoteError",
    "WapiConnectionError",
    "WapiError",
]
