"""Cache em memória de respostas de leitura da W-API.

Expiração preguiçosa: entrada vencida é removida no lookup, sem varredura
em background. Capacidade ilimitada por padrão; `max_entries` > 0 ativa
despejo LRU.
"""

from __future__ import annotations

import json
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wapi_gateway.app.protocols.cache import ResponseCacheProtocol

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)


class _Miss:
    """Sentinel de ausência no cache (None é um valor cacheável)."""

    _instance: _Miss | None = None

    def __new__(cls) -> _Miss:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False


MISS = _Miss()


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Entrada do cache."""

    key: str
    value: Any
    stored_at: float
    expires_at: float


def make_cache_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """Chave determinística: endpoint + parâmetros serializados com chaves ordenadas."""
    serialized = json.dumps(
        dict(params or {}),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return f"{endpoint}:{serialized}"


class ResponseCache(ResponseCacheProtocol):
    """Mapa chave -> CacheEntry com TTL por entrada.

    Args:
        max_entries: 0 = ilimitado; > 0 despeja a entrada menos usada.
        clock: Relógio em segundos.
    """

    def __init__(
        self,
        max_entries: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._max_entries = max_entries
        self._clock = clock
        if max_entries <= 0:
            logger.debug("response_cache_unbounded")

    def lookup(self, key: str) -> Any:
        """Retorna o valor em cache ou MISS (removendo entrada vencida)."""
        entry = self._entries.get(key)
        if entry is None:
            return MISS
        if self._clock() > entry.expires_at:
            del self._entries[key]
            return MISS
        self._entries.move_to_end(key)
        return entry.value

    def store(self, key: str, value: Any, ttl_seconds: float) -> None:
        now = self._clock()
        self._entries[key] = CacheEntry(
            key=key,
            value=value,
            stored_at=now,
            expires_at=now + ttl_seconds,
        )
        self._entries.move_to_end(key)
        if self._max_entries > 0:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
                logger.debug("response_cache_evicted", extra={"size": len(self._entries)})

    def invalidate_all(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
