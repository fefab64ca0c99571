"""Normalização de telefones para o formato de chat da W-API.

Transformação pura de string: remove tudo que não é dígito e adiciona
o sufixo de chat. Entrada malformada não gera erro.
"""

from __future__ import annotations

import re

from wapi_gateway.config.settings import DEFAULT_PHONE_SUFFIX

_NON_DIGITS = re.compile(r"\D")


def normalize_phone(phone: str, suffix: str = DEFAULT_PHONE_SUFFIX) -> str:
    """Ex: "+55 (11) 99999-9999" -> "5511999999999@c.us".

    Um sufixo já presente é descartado junto com os demais não-dígitos.
    """
    digits = _NON_DIGITS.sub("", phone.split("@", 1)[0])
    return f"{digits}{suffix}"


def prepare_phone(phone: str, *, enabled: bool, suffix: str = DEFAULT_PHONE_SUFFIX) -> str:
    """Normaliza quando habilitado; caso contrário repassa como veio."""
    if not enabled:
        return phone
    return normalize_phone(phone, suffix)
