"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e monta o serviço
W-API com o transporte concreto.

Uso:
    from wapi_gateway.app.bootstrap import initialize_app, create_wapi_service

    initialize_app()
    service = create_wapi_service()
"""

from __future__ import annotations

import logging

from wapi_gateway.app.bootstrap.wapi_factory import create_wapi_service
from wapi_gateway.app.observability import get_correlation_id
from wapi_gateway.config.logging import configure_logging
from wapi_gateway.config.settings import get_server_settings, get_wapi_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "create_wapi_service",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    server = get_server_settings()
    configure_logging(
        level=server.log_level,
        service_name=server.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=server.log_json,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    server = get_server_settings()
    errors: list[str] = []
    errors.extend(f"server: {error}" for error in server.validate())
    errors.extend(f"wapi: {error}" for error in get_wapi_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": server.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": server.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if server.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {server.environment}:\n{details}")
    return errors
