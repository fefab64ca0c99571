"""Entrypoint do proxy HTTP local da W-API.

Expõe as operações do WapiService como rotas REST, repassando o JSON da
W-API como veio. CORS aberto, sem autenticação.

Uso (produção):
    uvicorn wapi_gateway.app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    wapi-gateway
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes import create_api_router
from wapi_gateway.api.routes.dependencies import error_response
from wapi_gateway.api.routes.health.router import API_VERSION
from wapi_gateway.app.bootstrap import (
    create_wapi_service,
    initialize_app,
    validate_runtime_settings,
)
from wapi_gateway.app.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from wapi_gateway.app.observability.correlation import CORRELATION_HEADER
from wapi_gateway.config.logging import get_logger
from wapi_gateway.config.settings import get_server_settings, get_wapi_settings
from wapi_gateway.utils.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable
    from contextlib import AbstractAsyncContextManager

    from starlette.responses import Response

    from wapi_gateway.app.services import WapiService

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _build_lifespan(
    service_factory: Callable[[], WapiService] | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Monta o WapiService no startup e o desmonta no shutdown.

        ConfigError no startup é fatal: o processo não sobe sem credenciais.
        """
        logger.info("app_starting")
        if service_factory is None:
            validate_runtime_settings()
            settings = get_wapi_settings()
            if not settings.direct_mode:
                # O proxy é o próprio servidor local: em modo local chamaria a si mesmo
                raise ConfigError(["WAPI_DIRECT_MODE deve ser true no processo do proxy"])
            service = create_wapi_service(settings)
        else:
            service = service_factory()

        app.state.wapi_service = service
        await service.start()
        try:
            yield
        finally:
            logger.info("app_shutting_down")
            await service.shutdown()
            app.state.wapi_service = None

    return lifespan


async def _validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    logger.warning(
        "proxy_request_invalid",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "kind": "validation_error",
                "message": "Requisição inválida",
                "details": jsonable_encoder(errors),
            },
        },
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "proxy_unhandled_error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(exc)


async def _correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app(service_factory: Callable[[], WapiService] | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        service_factory: Fábrica do WapiService; por padrão usa settings
            do ambiente.
    """
    fastapi_app = FastAPI(
        title="W-API WhatsApp Gateway",
        description="Proxy local para a W-API com cache, rate limit e health check",
        version=API_VERSION,
        lifespan=_build_lifespan(service_factory),
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(_correlation_middleware)
    fastapi_app.add_exception_handler(RequestValidationError, _validation_error_handler)
    fastapi_app.add_exception_handler(Exception, _unhandled_error_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    server = get_server_settings()
    logger.info("server_starting", extra={"host": server.host, "port": server.port})
    uvicorn.run(
        "wapi_gateway.app.app:app",
        host=server.host,
        port=server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
