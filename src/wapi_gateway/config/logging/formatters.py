"""Formatters de logging.

JSON (padrão) com os campos obrigatórios:
- asctime, level, logger, message
- correlation_id (por requisição do proxy)
- service

O formatter de texto existe para execução local no terminal.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(service)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "wapi_gateway.app.services.health_poller",
            "message": "health_transition",
            "correlation_id": "",
            "service": "wapi_gateway",
            "connected": true
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para desenvolvimento local."""
    return logging.Formatter(TEXT_FORMAT)
