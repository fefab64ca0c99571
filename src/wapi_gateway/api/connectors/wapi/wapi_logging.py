"""Helpers de logging para a W-API (sem tokens nem telefones)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_STATUS_HINTS = {
    401: "Autenticação falhou. Verifique o token da W-API.",
    403: "Acesso proibido. Verifique as permissões da conta.",
    404: "Endpoint não encontrado. Verifique o host e o ID da instância.",
}


def log_remote_error(method: str, endpoint: str, status_code: int) -> None:
    """Loga resposta de falha da W-API com dica por status."""
    extra: dict[str, object] = {
        "method": method.upper(),
        "endpoint": endpoint,
        "status_code": status_code,
    }
    hint = _STATUS_HINTS.get(status_code)
    if hint:
        extra["hint"] = hint
    logger.warning("wapi_remote_error", extra=extra)


def log_connection_error(method: str, endpoint: str, error_type: str) -> None:
    """Loga falha sem resposta (rede, DNS, timeout)."""
    logger.warning(
        "wapi_connection_error",
        extra={
            "method": method.upper(),
            "endpoint": endpoint,
            "error_type": error_type,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "wapi_request_ok",
        extra={
            "method": method.upper(),
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
