"""Serviços da aplicação: pipeline de requisições e monitoramento da instância."""

from wapi_gateway.app.services.events import EventBus, EventRecorder, EventType, ServiceEvent
from wapi_gateway.app.services.health_poller import ConnectionState, HealthPoller
from wapi_gateway.app.services.rate_limiter import AdmissionDecision, SlidingWindowRateLimiter
from wapi_gateway.app.services.request_executor import RequestExecutor
from wapi_gateway.app.services.response_cache import MISS, CacheEntry, ResponseCache, make_cache_key
from wapi_gateway.app.services.wapi_service import WapiService

__all__ = [
    "MISS",
    "AdmissionDecision",
    "CacheEntry",
    "ConnectionState",
    "EventBus",
    "EventRecorder",
    "EventType",
    "HealthPoller",
    "RequestExecutor",
    "ResponseCache",
    "ServiceEvent",
    "SlidingWindowRateLimiter",
    "WapiService",
    "make_cache_key",
]
