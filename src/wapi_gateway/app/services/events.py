"""Eventos do serviço W-API (observer explícito).

Tipos emitidos:
- connected / disconnected: transição detectada pelo health poller
- health_check: todo tick bem-sucedido do poller
- error: tick do poller que falhou
- request_error: falha classificada de uma requisição

Listeners podem ser síncronos ou coroutines; exceções de listener são
logadas e isoladas do emissor.
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    Listener = Callable[["ServiceEvent"], Any]

logger = logging.getLogger(__name__)


class EventType(StrEnum):
    """Tipos de evento do serviço."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    HEALTH_CHECK = "health_check"
    ERROR = "error"
    REQUEST_ERROR = "request_error"


@dataclass(frozen=True, slots=True)
class ServiceEvent:
    """Evento entregue aos listeners."""

    type: EventType
    payload: Any = None
    error: BaseException | None = None
    timestamp: float = field(default_factory=time.time)


class EventBus:
    """Registro de listeners por tipo de evento.

    `subscribe(None, fn)` recebe todos os tipos.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[EventType | None, list[Listener]] = defaultdict(list)
        self._pending: set[asyncio.Task[Any]] = set()

    def subscribe(
        self,
        event_type: EventType | str | None,
        listener: Listener,
    ) -> Callable[[], None]:
        """Registra listener e retorna função que o remove."""
        key = EventType(event_type) if event_type is not None else None
        self._listeners[key].append(listener)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners[key].remove(listener)

        return _unsubscribe

    def emit(
        self,
        event_type: EventType,
        payload: Any = None,
        error: BaseException | None = None,
    ) -> ServiceEvent:
        """Entrega o evento a cada listener uma única vez."""
        event = ServiceEvent(type=event_type, payload=payload, error=error)
        listeners = [*self._listeners.get(event_type, ()), *self._listeners.get(None, ())]
        for listener in listeners:
            self._dispatch(listener, event)
        return event

    def listener_count(self, event_type: EventType | None = None) -> int:
        return len(self._listeners.get(event_type, ()))

    def clear(self) -> None:
        self._listeners.clear()

    async def drain(self, timeout_seconds: float = 5.0) -> None:
        """Aguarda listeners assíncronos pendentes (usado no shutdown)."""
        if not self._pending:
            return
        _, pending = await asyncio.wait(list(self._pending), timeout=timeout_seconds)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def _dispatch(self, listener: Listener, event: ServiceEvent) -> None:
        try:
            result = listener(event)
        except Exception as exc:
            logger.error(
                "event_listener_failed",
                extra={"event_type": event.type.value, "error_type": type(exc).__name__},
            )
            return

        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._pending.add(task)
            task.add_done_callback(lambda t, et=event.type: self._on_task_done(t, et))

    def _on_task_done(self, task: asyncio.Task[Any], event_type: EventType) -> None:
        self._pending.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "event_listener_failed",
                    extra={"event_type": event_type.value, "error_type": type(exc).__name__},
                )


class EventRecorder:
    """Listener que acumula eventos para consulta posterior."""

    def __init__(self) -> None:
        self.events: list[ServiceEvent] = []

    def __call__(self, event: ServiceEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[ServiceEvent]:
        return [e for e in self.events if e.type == event_type]

    @property
    def types(self) -> list[EventType]:
        return [e.type for e in self.events]

    def clear(self) -> None:
        self.events.clear()
