"""Testes do barramento de eventos."""

from __future__ import annotations

import asyncio

import pytest

from wapi_gateway.app.services.events import EventBus, EventRecorder, EventType


class TestEventBus:
    """Testes de subscribe/emit."""

    def test_listener_receives_only_its_type(self) -> None:
        bus = EventBus()
        connected = EventRecorder()
        bus.subscribe(EventType.CONNECTED, connected)

        bus.emit(EventType.CONNECTED, payload={"connected": True})
        bus.emit(EventType.HEALTH_CHECK, payload={"connected": True})

        assert connected.types == [EventType.CONNECTED]
        assert connected.events[0].payload == {"connected": True}

    def test_wildcard_listener_receives_everything(self) -> None:
        bus = EventBus()
        recorder = EventRecorder()
        bus.subscribe(None, recorder)

        bus.emit(EventType.ERROR, error=RuntimeError("x"))
        bus.emit(EventType.REQUEST_ERROR)

        assert recorder.types == [EventType.ERROR, EventType.REQUEST_ERROR]

    def test_subscribe_accepts_string_type(self) -> None:
        bus = EventBus()
        recorder = EventRecorder()
        bus.subscribe("disconnected", recorder)

        bus.emit(EventType.DISCONNECTED)

        assert len(recorder.events) == 1

    def test_unsubscribe_stops_delivery(self) -> None:
        bus = EventBus()
        recorder = EventRecorder()
        unsubscribe = bus.subscribe(EventType.HEALTH_CHECK, recorder)

        unsubscribe()
        unsubscribe()  # idempotente
        bus.emit(EventType.HEALTH_CHECK)

        assert recorder.events == []
        assert bus.listener_count(EventType.HEALTH_CHECK) == 0

    def test_failing_listener_does_not_break_others(self) -> None:
        """Exceção de um listener é isolada."""
        bus = EventBus()
        recorder = EventRecorder()

        def _boom(event: object) -> None:
            raise ValueError("listener quebrado")

        bus.subscribe(EventType.ERROR, _boom)
        bus.subscribe(EventType.ERROR, recorder)

        bus.emit(EventType.ERROR)

        assert len(recorder.events) == 1

    @pytest.mark.asyncio
    async def test_async_listener_is_scheduled(self) -> None:
        bus = EventBus()
        received: list[EventType] = []

        async def _listener(event) -> None:  # type: ignore[no-untyped-def]
            await asyncio.sleep(0)
            received.append(event.type)

        bus.subscribe(EventType.CONNECTED, _listener)
        bus.emit(EventType.CONNECTED)
        await bus.drain()

        assert received == [EventType.CONNECTED]
