"""Métricas do cliente W-API registradas como logs estruturados.

Agregáveis depois pelo coletor de logs (sem backend de métricas dedicado).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    endpoint: str,
    method: str,
    latency_ms: float,
    *,
    cache_hit: bool = False,
    outcome: str = "ok",
) -> None:
    """Registra latência de uma chamada à W-API.

    Args:
        endpoint: Endpoint lógico (ex: "/message/send-text")
        method: Método HTTP
        latency_ms: Latência em milissegundos
        cache_hit: True se servido do cache local
        outcome: "ok" ou o tipo de erro
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "endpoint": endpoint,
            "method": method.upper(),
            "latency_ms": round(latency_ms, 2),
            "cache_hit": cache_hit,
            "outcome": outcome,
        },
    )


def record_rejection(endpoint: str, retry_after_ms: int) -> None:
    """Registra requisição rejeitada pelo rate limiter."""
    logger.warning(
        "metric_rate_limited",
        extra={
            "metric_type": "counter",
            "endpoint": endpoint,
            "retry_after_ms": retry_after_ms,
        },
    )
