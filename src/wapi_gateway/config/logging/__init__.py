"""Configuração de logging estruturado.

Uso:
    from wapi_gateway.config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="wapi_gateway")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("wapi_request_ok", extra={"endpoint": "/instance/device"})

Tokens, números de telefone e corpos de mensagem nunca vão para os logs.
"""

from wapi_gateway.config.logging.config import configure_logging, get_logger
from wapi_gateway.config.logging.filters import CorrelationIdFilter
from wapi_gateway.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
