"""Dependências compartilhadas pelas rotas do proxy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from wapi_gateway.app.services import WapiService
from wapi_gateway.utils.errors import WapiError

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)


def get_wapi_service(request: Request) -> WapiService:
    """Serviço montado no lifespan da aplicação."""
    service = getattr(request.app.state, "wapi_service", None)
    if service is None:
        raise RuntimeError("WapiService não inicializado")
    return service


def serialize_error(exc: BaseException) -> Any:
    """Serialização best-effort de qualquer erro para o corpo da resposta."""
    if isinstance(exc, WapiError):
        return exc.to_dict()
    return {"kind": type(exc).__name__, "message": str(exc)}


def error_response(exc: BaseException) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": serialize_error(exc)},
    )


async def forward(operation: Awaitable[Any], *, route: str) -> JSONResponse:
    """Aguarda a operação e devolve o JSON da W-API como veio.

    Qualquer erro vira 500 com `{"success": false, "error": ...}`.
    """
    try:
        result = await operation
    except Exception as exc:
        logger.warning(
            "proxy_request_failed",
            extra={"route": route, "error_type": type(exc).__name__},
        )
        return error_response(exc)
    return JSONResponse(status_code=200, content=result)


ServiceDep = Annotated[WapiService, Depends(get_wapi_service)]
