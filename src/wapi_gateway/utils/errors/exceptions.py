"""Exceções de domínio para chamadas à W-API.

Taxonomia:
- RateLimitedError: cota da janela deslizante esgotada (nenhuma chamada de rede feita)
- RemoteError: W-API respondeu com status de falha
- WapiConnectionError: nenhuma resposta recebida (rede/timeout)
- ConfigError: credenciais ausentes na construção do serviço

Nenhuma exceção aqui é retentada automaticamente.
"""

from __future__ import annotations

from typing import Any


class WapiError(Exception):
    """Base para todas as falhas do cliente W-API."""

    kind: str = "wapi_error"

    def to_dict(self) -> dict[str, Any]:
        """Serialização best-effort para respostas HTTP do proxy."""
        return {"kind": self.kind, "message": str(self)}


class RateLimitedError(WapiError):
    """Requisição rejeitada pelo rate limiter local."""

    kind = "rate_limited"

    def __init__(self, retry_after_ms: int) -> None:
        super().__init__(f"Limite de requisições atingido. Tente novamente em {retry_after_ms} ms")
        self.retry_after_ms = retry_after_ms

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "retryAfterMs": self.retry_after_ms}


class RemoteError(WapiError):
    """W-API respondeu com status não-2xx."""

    kind = "remote_error"

    def __init__(self, status_code: int, body: Any = None) -> None:
        super().__init__(f"W-API Error: {status_code} - {_describe_body(body)}")
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        # Corpo do fornecedor repassado como veio
        if self.body is not None:
            return self.body if isinstance(self.body, dict) else {"message": self.body}
        return {**super().to_dict(), "statusCode": self.status_code}


class WapiConnectionError(WapiError):
    """Nenhuma resposta recebida do servidor (rede, DNS, timeout)."""

    kind = "connection_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(WapiError):
    """Configuração obrigatória ausente ou inválida."""

    kind = "config_error"

    def __init__(self, errors: list[str]) -> None:
        details = "; ".join(errors) if errors else "configuração inválida"
        super().__init__(f"Configuração inválida: {details}")
        self.errors = list(errors)


def _describe_body(body: Any) -> str:
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    if body is None or body == "":
        return "sem corpo"
    return str(body)[:200]
