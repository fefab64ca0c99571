"""Agregador de rotas: registra os routers de cada grupo de operações.

Uso:
    from wapi_gateway.api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from wapi_gateway.api.routes.chats.router import router as chats_router
from wapi_gateway.api.routes.contacts.router import router as contacts_router
from wapi_gateway.api.routes.groups.router import router as groups_router
from wapi_gateway.api.routes.health.router import router as health_router
from wapi_gateway.api.routes.instance.router import router as instance_router
from wapi_gateway.api.routes.message.router import router as message_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Sem prefixo: / e /health na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(instance_router, prefix="/instance", tags=["instance"])
    api_router.include_router(message_router, prefix="/message", tags=["message"])
    api_router.include_router(contacts_router, prefix="/contacts", tags=["contacts"])
    api_router.include_router(chats_router, prefix="/chats", tags=["chats"])
    api_router.include_router(groups_router, prefix="/groups", tags=["groups"])

    return api_router
