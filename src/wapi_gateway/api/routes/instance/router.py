"""Endpoints de instância.

- GET  /instance/status      -> /instance/device
- GET  /instance/qr-code
- POST /instance/connect | disconnect | restart | logout
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes.dependencies import ServiceDep, forward

router = APIRouter()


@router.get("/status")
async def get_status(service: ServiceDep) -> JSONResponse:
    return await forward(service.get_status(), route="instance.status")


@router.get("/qr-code")
async def get_qr_code(service: ServiceDep) -> JSONResponse:
    return await forward(service.get_qr_code(), route="instance.qr_code")


@router.post("/connect")
async def connect(service: ServiceDep) -> JSONResponse:
    return await forward(service.connect(), route="instance.connect")


@router.post("/disconnect")
async def disconnect(service: ServiceDep) -> JSONResponse:
    return await forward(service.disconnect(), route="instance.disconnect")


@router.post("/restart")
async def restart(service: ServiceDep) -> JSONResponse:
    return await forward(service.restart(), route="instance.restart")


@router.post("/logout")
async def logout(service: ServiceDep) -> JSONResponse:
    return await forward(service.logout(), route="instance.logout")
