"""Protocolo de transporte HTTP usado pelo executor.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class WapiTransportProtocol(Protocol):
    """Contrato mínimo para o transporte até a W-API.

    Implementações levantam RemoteError quando a W-API responde com falha
    e WapiConnectionError quando nenhuma resposta chega.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any: ...

    async def aclose(self) -> None: ...
