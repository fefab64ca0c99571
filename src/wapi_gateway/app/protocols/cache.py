"""Protocolo de cache de respostas de leitura."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ResponseCacheProtocol(ABC):
    """Contrato mínimo do cache usado pelo executor.

    Métodos canônicos:
    - lookup(key) -> valor ou MISS
    - store(key, value, ttl_seconds)
    - invalidate_all()
    """

    @abstractmethod
    def lookup(self, key: str) -> Any:
        """Retorna o valor armazenado ou o sentinel MISS."""

    @abstractmethod
    def store(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Armazena valor com TTL em segundos."""

    @abstractmethod
    def invalidate_all(self) -> None:
        """Remove todas as entradas."""
