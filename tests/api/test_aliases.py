"""Testes da tabela de aliases."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from wapi_gateway.api.aliases import WA_ALIASES, call_alias, resolve_alias
from wapi_gateway.app.services import WapiService


def test_every_alias_points_to_a_service_method() -> None:
    for alias, method_name in WA_ALIASES.items():
        assert callable(getattr(WapiService, method_name, None)), alias


def test_resolve_known_aliases() -> None:
    assert resolve_alias("text") == "send_text"
    assert resolve_alias("qr") == "get_qr_code"
    assert resolve_alias("doc") == "send_document"
    assert resolve_alias("leaveGroup") == "leave_group"


def test_resolve_unknown_alias_raises_key_error() -> None:
    with pytest.raises(KeyError, match="Alias desconhecido"):
        resolve_alias("sendSticker")


@pytest.mark.asyncio
async def test_call_alias_delegates_with_arguments() -> None:
    service = MagicMock()
    service.send_text = AsyncMock(return_value={"messageId": "1"})

    result = await call_alias(service, "text", "5511@c.us", "Olá")

    assert result == {"messageId": "1"}
    service.send_text.assert_awaited_once_with("5511@c.us", "Olá")
