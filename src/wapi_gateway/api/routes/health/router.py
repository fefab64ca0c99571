"""Descrição da API e liveness do proxy."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()

API_NAME = "W-API WhatsApp Gateway"
API_VERSION = "1.0.0"

ENDPOINT_GROUPS: dict[str, list[str]] = {
    "instance": [
        "/instance/connect",
        "/instance/disconnect",
        "/instance/restart",
        "/instance/logout",
        "/instance/status",
        "/instance/qr-code",
    ],
    "message": [
        "/message/send-text",
        "/message/send-image",
        "/message/send-document",
        "/message/send-audio",
        "/message/send-video",
        "/message/send-location",
        "/message/send-contact",
        "/message/send-button",
        "/message/send-list",
        "/message/reply",
    ],
    "contacts": [
        "/contacts/get",
        "/contacts/get-all",
        "/contacts/check",
        "/contacts/save",
        "/contacts/get-about",
    ],
    "chats": [
        "/chats/get",
        "/chats/get-all",
        "/chats/archive",
        "/chats/unarchive",
        "/chats/clear",
        "/chats/delete",
        "/chats/pin",
        "/chats/unpin",
    ],
    "groups": [
        "/groups/create",
        "/groups/get",
        "/groups/update-participants",
        "/groups/update-settings",
        "/groups/leave",
        "/groups/invite-code",
    ],
}


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = API_VERSION
    instance: dict[str, Any] | None = None


@router.get("/")
async def describe_api() -> dict[str, Any]:
    """Lista os grupos de endpoints expostos pelo proxy."""
    return {"api": API_NAME, "version": API_VERSION, "endpoints": ENDPOINT_GROUPS}


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness do proxy com o último estado conhecido da instância.

    Não consulta a W-API; reflete o último tick do health poller.
    """
    service = getattr(request.app.state, "wapi_service", None)
    return HealthResponse(
        status="healthy",
        service="wapi_gateway",
        timestamp=datetime.now(UTC).isoformat(),
        instance=service.connection_state.as_dict() if service is not None else None,
    )
