"""Polling periódico de status da instância W-API.

A cada intervalo consulta o status (sem cache) e:
- emite `connected` / `disconnected` apenas quando o flag muda
- emite `health_check` em todo tick bem-sucedido
- em falha, registra o erro e emite `error` sem alterar o flag anterior

Falha de polling não é tratada como desconexão. Após stop() nenhum tick
roda e nenhum evento é emitido.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wapi_gateway.app.services.events import EventBus, EventType

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS: int = 60_000

_CONNECTED_LABELS = frozenset({"connected", "open", "online"})


@dataclass(slots=True)
class ConnectionState:
    """Estado de conectividade conhecido pelo poller."""

    connected: bool = False
    status_label: str = "unknown"
    last_error: BaseException | None = None
    last_checked_at: float | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "connected": self.connected,
            "status": self.status_label,
            "last_error": str(self.last_error) if self.last_error else None,
            "last_checked_at": self.last_checked_at,
        }


def is_connected_payload(payload: Any) -> bool:
    """Deriva o flag de conexão da resposta de status da W-API.

    Ordem: `connected: bool` no topo, depois `data` (recursivo), por fim
    `status`/`state` textual no topo. Envelopes como
    `{"status": "success", "data": {...}}` são decididos pelo `data`.
    """
    return _connection_signal(payload) is True


def _connection_signal(payload: Any) -> bool | None:
    if not isinstance(payload, dict):
        return None
    if isinstance(payload.get("connected"), bool):
        return payload["connected"]
    nested = _connection_signal(payload.get("data"))
    if nested is not None:
        return nested
    for field in ("status", "state"):
        value = payload.get(field)
        if isinstance(value, str) and value.strip():
            return value.strip().lower() in _CONNECTED_LABELS
    return None


def _status_label(payload: Any, connected: bool) -> str:
    """Rótulo textual do nível que decidiu o flag."""
    if isinstance(payload, dict):
        if _connection_signal(payload.get("data")) is not None:
            return _status_label(payload["data"], connected)
        for field in ("status", "state"):
            value = payload.get(field)
            if isinstance(value, str) and value:
                return value
    return "connected" if connected else "disconnected"


class HealthPoller:
    """Loop asyncio que consulta o status em intervalo fixo.

    Args:
        fetch_status: Coroutine que busca o status sem passar pelo cache.
        events: Barramento onde os eventos são emitidos.
        interval_ms: Intervalo entre ticks.
        sleep: Função de espera (injetável em testes).
    """

    def __init__(
        self,
        fetch_status: Callable[[], Awaitable[Any]],
        events: EventBus,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._fetch_status = fetch_status
        self._events = events
        self._interval_s = interval_ms / 1000
        self._sleep = sleep
        self._state = ConnectionState()
        self._task: asyncio.Task[None] | None = None
        self._stopped = False

    @property
    def state(self) -> ConnectionState:
        """Cópia do estado atual."""
        return dataclasses.replace(self._state)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Agenda o loop no event loop corrente (idempotente)."""
        if self.running:
            return
        self._stopped = False
        self._task = asyncio.create_task(self._run(), name="wapi-health-poller")
        logger.info("health_poller_started", extra={"interval_ms": int(self._interval_s * 1000)})

    async def stop(self) -> None:
        """Cancela o loop; nenhum evento é emitido depois disso."""
        self._stopped = True
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("health_poller_stopped")

    async def tick(self) -> ConnectionState:
        """Executa uma verificação de status e emite os eventos do tick."""
        try:
            payload = await self._fetch_status()
        except Exception as exc:
            if self._stopped:
                return self.state
            self._state.last_error = exc
            self._state.last_checked_at = time.time()
            logger.warning(
                "health_check_failed",
                extra={
                    "error_type": type(exc).__name__,
                    "connected": self._state.connected,
                },
            )
            self._events.emit(EventType.ERROR, error=exc)
            return self.state

        if self._stopped:
            return self.state

        connected = is_connected_payload(payload)
        previous = self._state.connected
        self._state.connected = connected
        self._state.status_label = _status_label(payload, connected)
        self._state.last_error = None
        self._state.last_checked_at = time.time()

        if connected != previous:
            logger.info(
                "health_transition",
                extra={"connected": connected, "status": self._state.status_label},
            )
            event_type = EventType.CONNECTED if connected else EventType.DISCONNECTED
            self._events.emit(event_type, payload=payload)

        self._events.emit(EventType.HEALTH_CHECK, payload=payload)
        return self.state

    async def _run(self) -> None:
        while not self._stopped:
            await self._sleep(self._interval_s)
            if self._stopped:
                break
            await self.tick()
