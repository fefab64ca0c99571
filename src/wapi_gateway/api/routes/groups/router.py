"""Endpoints de grupos."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes.dependencies import ServiceDep, forward
from wapi_gateway.api.routes.schemas import (
    CreateGroupBody,
    GroupIdBody,
    UpdateGroupSettingsBody,
    UpdateParticipantsBody,
)

router = APIRouter()


@router.post("/create")
async def create_group(body: CreateGroupBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.create_group(body.name, body.participants), route="groups.create")


@router.get("/get")
async def get_group(
    service: ServiceDep,
    group_id: str = Query(..., alias="groupId"),
) -> JSONResponse:
    return await forward(service.get_group(group_id), route="groups.get")


@router.post("/update-participants")
async def update_group_participants(
    body: UpdateParticipantsBody,
    service: ServiceDep,
) -> JSONResponse:
    return await forward(
        service.update_group_participants(body.group_id, body.participants, body.action),
        route="groups.update_participants",
    )


@router.post("/update-settings")
async def update_group_settings(
    body: UpdateGroupSettingsBody,
    service: ServiceDep,
) -> JSONResponse:
    return await forward(
        service.update_group_settings(body.group_id, body.settings),
        route="groups.update_settings",
    )


@router.post("/leave")
async def leave_group(body: GroupIdBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.leave_group(body.group_id), route="groups.leave")


@router.get("/invite-code")
async def get_group_invite_code(
    service: ServiceDep,
    group_id: str = Query(..., alias="groupId"),
) -> JSONResponse:
    return await forward(service.get_group_invite_code(group_id), route="groups.invite_code")
