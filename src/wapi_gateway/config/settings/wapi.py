"""Settings do cliente W-API.

Credenciais, cache, rate limit e health check de uma instância.
Imutável após construção.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_HOST: str = "api.w-api.app"
API_VERSION_PATH: str = "/v1"
DEFAULT_PHONE_SUFFIX: str = "@c.us"
DEFAULT_PROXY_BASE_URL: str = "http://localhost:3000"


@dataclass(frozen=True)
class WapiSettings:
    """Configurações de acesso à W-API.

    Attributes:
        api_host: Host da W-API (sem esquema)
        instance_id: ID da instância na W-API
        api_token: Token Bearer da W-API
        cache_enabled: Liga o cache de respostas de leitura
        cache_ttl_seconds: TTL das entradas de cache
        cache_max_entries: Limite LRU do cache (0 = ilimitado)
        rate_limit_per_minute: Teto de requisições na janela de 60s (0 = sem limite)
        health_check_enabled: Liga o polling periódico de status
        health_check_interval_ms: Intervalo do polling de status
        logging_enabled: Loga cada requisição em DEBUG
        request_timeout_seconds: Timeout de conexão/leitura do transporte
        normalize_phones: Normaliza telefones antes do envio
        phone_suffix: Sufixo adicionado na normalização
        direct_mode: True fala direto com a W-API; False usa o proxy local
        proxy_base_url: URL do proxy local (modo local)
    """

    # Credenciais
    api_host: str = DEFAULT_API_HOST
    instance_id: str = ""
    api_token: str = ""

    # Modo de acesso
    direct_mode: bool = True
    proxy_base_url: str = DEFAULT_PROXY_BASE_URL

    # Cache
    cache_enabled: bool = True
    cache_ttl_seconds: int = 300
    cache_max_entries: int = 0

    # Rate limit
    rate_limit_per_minute: int = 60

    # Health check
    health_check_enabled: bool = True
    health_check_interval_ms: int = 60_000

    logging_enabled: bool = True
    request_timeout_seconds: float = 30.0

    # Telefones
    normalize_phones: bool = False
    phone_suffix: str = DEFAULT_PHONE_SUFFIX

    @property
    def base_url(self) -> str:
        """URL base completa da API com versão."""
        return f"https://{self.api_host}{API_VERSION_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        # Credenciais só são exigidas no modo direto; no local ficam com o proxy
        if self.direct_mode:
            if not self.instance_id:
                errors.append("WAPI_INSTANCE_ID não configurado")

            if not self.api_token:
                errors.append("WAPI_API_TOKEN não configurado")

            if not self.api_host:
                errors.append("WAPI_API_HOST não pode ser vazio")
        elif not self.proxy_base_url.startswith(("http://", "https://")):
            errors.append("WAPI_PROXY_BASE_URL deve começar com http:// ou https://")

        if self.cache_ttl_seconds <= 0:
            errors.append("WAPI_CACHE_TTL_SECONDS deve ser > 0")

        if self.cache_max_entries < 0:
            errors.append("WAPI_CACHE_MAX_ENTRIES deve ser >= 0")

        if self.rate_limit_per_minute < 0:
            errors.append("WAPI_RATE_LIMIT_PER_MINUTE deve ser >= 0")

        if self.health_check_interval_ms <= 0:
            errors.append("WAPI_HEALTH_CHECK_INTERVAL_MS deve ser > 0")

        if self.request_timeout_seconds <= 0:
            errors.append("WAPI_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("true", "1", "yes", "on")


def _load_from_env() -> WapiSettings:
    """Carrega WapiSettings a partir de variáveis de ambiente."""
    return WapiSettings(
        api_host=os.getenv("WAPI_API_HOST", DEFAULT_API_HOST),
        instance_id=os.getenv("WAPI_INSTANCE_ID", ""),
        api_token=os.getenv("WAPI_API_TOKEN", ""),
        direct_mode=_env_bool("WAPI_DIRECT_MODE", True),
        proxy_base_url=os.getenv("WAPI_PROXY_BASE_URL", DEFAULT_PROXY_BASE_URL),
        cache_enabled=_env_bool("WAPI_CACHE_ENABLED", True),
        cache_ttl_seconds=int(os.getenv("WAPI_CACHE_TTL_SECONDS", "300")),
        cache_max_entries=int(os.getenv("WAPI_CACHE_MAX_ENTRIES", "0")),
        rate_limit_per_minute=int(os.getenv("WAPI_RATE_LIMIT_PER_MINUTE", "60")),
        health_check_enabled=_env_bool("WAPI_HEALTH_CHECK_ENABLED", True),
        health_check_interval_ms=int(os.getenv("WAPI_HEALTH_CHECK_INTERVAL_MS", "60000")),
        logging_enabled=_env_bool("WAPI_LOGGING_ENABLED", True),
        request_timeout_seconds=float(os.getenv("WAPI_REQUEST_TIMEOUT_SECONDS", "30")),
        normalize_phones=_env_bool("WAPI_NORMALIZE_PHONES", False),
        phone_suffix=os.getenv("WAPI_PHONE_SUFFIX", DEFAULT_PHONE_SUFFIX),
    )


@lru_cache(maxsize=1)
def get_wapi_settings() -> WapiSettings:
    """Retorna instância cacheada de WapiSettings."""
    return _load_from_env()
