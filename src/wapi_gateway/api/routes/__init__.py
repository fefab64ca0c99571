"""Rotas HTTP do proxy local: repasse direto para o WapiService.

Estrutura por grupo:
- routes/health/: descrição da API e liveness
- routes/instance/, message/, contacts/, chats/, groups/: operações W-API

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from wapi_gateway.api.routes.router import create_api_router

__all__ = ["create_api_router"]
