"""Observabilidade: correlation_id e métricas via logs estruturados.

Uso:
    from wapi_gateway.app.observability import get_correlation_id, set_correlation_id
    from wapi_gateway.app.observability import record_latency
"""

from wapi_gateway.app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from wapi_gateway.app.observability.metrics import record_latency, record_rejection

__all__ = [
    "get_correlation_id",
    "record_latency",
    "record_rejection",
    "reset_correlation_id",
    "set_correlation_id",
]
