"""Testes da normalização de telefones."""

from __future__ import annotations

import pytest

from wapi_gateway.utils.phone import normalize_phone, prepare_phone


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("+55 (11) 99999-9999", "5511999999999@c.us"),
        ("5511999999999", "5511999999999@c.us"),
        ("5511999999999@c.us", "5511999999999@c.us"),
        ("", "@c.us"),
    ],
)
def test_normalize_phone(raw: str, expected: str) -> None:
    assert normalize_phone(raw) == expected


def test_normalize_phone_custom_suffix() -> None:
    assert normalize_phone("120363-0001@g.us", "@g.us") == "1203630001@g.us"


def test_prepare_phone_disabled_passes_through() -> None:
    assert prepare_phone("+55 11", enabled=False) == "+55 11"


def test_prepare_phone_enabled_normalizes() -> None:
    assert prepare_phone("+55 11", enabled=True, suffix="@s.whatsapp.net") == "5511@s.whatsapp.net"
