"""Executor de requisições à W-API.

Sequência por chamada:
1. rate limiter (rejeição imediata, sem rede)
2. cache (apenas leituras, cache ligado e sem bypass)
3. transporte
4. store no cache (apenas leituras)

Falhas de transporte emitem um único `request_error` e sobem ao chamador.
Nunca retenta.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from wapi_gateway.app.observability import record_latency, record_rejection
from wapi_gateway.app.services.events import EventBus, EventType
from wapi_gateway.app.services.response_cache import MISS, make_cache_key
from wapi_gateway.utils.errors import RateLimitedError, RemoteError, WapiConnectionError

if TYPE_CHECKING:
    from wapi_gateway.app.protocols import ResponseCacheProtocol, WapiTransportProtocol
    from wapi_gateway.app.services.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)

READ_METHODS = frozenset({"GET"})


class RequestExecutor:
    """Pipeline rate limit -> cache -> transporte.

    Args:
        transport: Transporte HTTP até a W-API.
        rate_limiter: Limiter compartilhado por todas as operações.
        cache: Cache de respostas de leitura.
        events: Barramento para `request_error`.
        cache_enabled: Liga o uso do cache para leituras.
        cache_ttl_seconds: TTL das respostas armazenadas.
        logging_enabled: Registra latência por requisição.
    """

    def __init__(
        self,
        transport: WapiTransportProtocol,
        rate_limiter: SlidingWindowRateLimiter,
        cache: ResponseCacheProtocol,
        events: EventBus,
        *,
        cache_enabled: bool = True,
        cache_ttl_seconds: float = 300,
        logging_enabled: bool = True,
    ) -> None:
        self._transport = transport
        self._rate_limiter = rate_limiter
        self._cache = cache
        self._events = events
        self._cache_enabled = cache_enabled
        self._cache_ttl_seconds = cache_ttl_seconds
        self._logging_enabled = logging_enabled

    async def execute(
        self,
        endpoint: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        *,
        bypass_cache: bool = False,
    ) -> Any:
        """Executa uma operação lógica.

        Args:
            endpoint: Endpoint lógico (ex: "/instance/device")
            method: Método HTTP
            params: Query (GET) ou corpo JSON (demais)
            bypass_cache: Ignora o lookup; a resposta ainda atualiza o cache

        Raises:
            RateLimitedError: Cota da janela esgotada
            RemoteError: W-API respondeu com falha
            WapiConnectionError: Nenhuma resposta recebida
        """
        method_upper = method.upper()

        decision = self._rate_limiter.admit()
        if not decision.allowed:
            record_rejection(endpoint, decision.retry_after_ms)
            raise RateLimitedError(decision.retry_after_ms)

        cacheable = self._cache_enabled and method_upper in READ_METHODS
        cache_key = make_cache_key(endpoint, params) if cacheable else None

        if cache_key is not None and not bypass_cache:
            cached = self._cache.lookup(cache_key)
            if cached is not MISS:
                if self._logging_enabled:
                    record_latency(endpoint, method_upper, 0.0, cache_hit=True)
                return cached

        started_at = time.perf_counter()
        try:
            result = await self._transport.request(method_upper, endpoint, params)
        except (RemoteError, WapiConnectionError) as exc:
            if self._logging_enabled:
                record_latency(
                    endpoint,
                    method_upper,
                    (time.perf_counter() - started_at) * 1000,
                    outcome=exc.kind,
                )
            self._events.emit(
                EventType.REQUEST_ERROR,
                payload={"endpoint": endpoint, "method": method_upper},
                error=exc,
            )
            raise

        if self._logging_enabled:
            record_latency(endpoint, method_upper, (time.perf_counter() - started_at) * 1000)

        if cache_key is not None:
            self._cache.store(cache_key, result, self._cache_ttl_seconds)
        return result
