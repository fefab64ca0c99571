"""Endpoints de chats.

Ações (archive, unarchive, clear, delete, pin, unpin) recebem `{"phone": ...}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes.dependencies import ServiceDep, forward
from wapi_gateway.api.routes.schemas import PhoneBody

router = APIRouter()


@router.get("/get")
async def get_chat(service: ServiceDep, phone: str = Query(...)) -> JSONResponse:
    return await forward(service.get_chat(phone), route="chats.get")


@router.get("/get-all")
async def get_chats(service: ServiceDep) -> JSONResponse:
    return await forward(service.get_chats(), route="chats.get_all")


@router.post("/archive")
async def archive_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.archive_chat(body.phone), route="chats.archive")


@router.post("/unarchive")
async def unarchive_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.unarchive_chat(body.phone), route="chats.unarchive")


@router.post("/clear")
async def clear_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.clear_chat(body.phone), route="chats.clear")


@router.post("/delete")
async def delete_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.delete_chat(body.phone), route="chats.delete")


@router.post("/pin")
async def pin_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.pin_chat(body.phone), route="chats.pin")


@router.post("/unpin")
async def unpin_chat(body: PhoneBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.unpin_chat(body.phone), route="chats.unpin")
