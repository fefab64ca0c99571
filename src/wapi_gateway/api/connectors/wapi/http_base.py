"""Envio HTTP comum aos transportes da W-API (direto e via proxy local).

Uma única tentativa por chamada. Toda falha sai classificada:
- httpx.RequestError (rede, timeout, decodificação, redirects) -> WapiConnectionError
- status não-2xx -> RemoteError com o corpo decodificado
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from wapi_gateway.api.connectors.wapi.wapi_logging import (
    log_connection_error,
    log_remote_error,
    log_success,
)
from wapi_gateway.utils.errors import RemoteError, WapiConnectionError

QUERY_METHODS = frozenset({"GET", "DELETE"})

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    endpoint: str,
    url: str,
    *,
    query: dict[str, Any],
    body: dict[str, Any] | None,
    headers: dict[str, str],
    timeout: float,
) -> Any:
    """Executa a requisição e devolve o corpo decodificado.

    Args:
        client: Cliente httpx compartilhado pelo transporte
        method: Método HTTP
        endpoint: Endpoint lógico, usado apenas nos logs
        url: URL absoluta
        query: Parâmetros de query string
        body: Corpo JSON (None para GET/DELETE)
        headers: Headers da requisição
        timeout: Timeout total em segundos

    Raises:
        RemoteError: Resposta com status não-2xx
        WapiConnectionError: Nenhuma resposta utilizável recebida
    """
    method_upper = method.upper()
    try:
        response = await client.request(
            method_upper,
            url,
            params=query,
            json=body,
            headers=headers,
            timeout=timeout,
        )
    except httpx.TimeoutException as exc:
        log_connection_error(method_upper, endpoint, type(exc).__name__)
        raise WapiConnectionError(
            "W-API Error: timeout aguardando resposta do servidor"
        ) from exc
    except httpx.RequestError as exc:
        log_connection_error(method_upper, endpoint, type(exc).__name__)
        raise WapiConnectionError(
            f"W-API Error: nenhuma resposta válida recebida do servidor ({type(exc).__name__})"
        ) from exc

    payload = decode_body(response)
    if not response.is_success:
        log_remote_error(method_upper, endpoint, response.status_code)
        raise RemoteError(response.status_code, payload)

    log_success(method_upper, endpoint, response.status_code)
    return payload


def decode_body(response: httpx.Response) -> Any:
    """JSON quando possível; texto cru caso contrário; None se vazio."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text
