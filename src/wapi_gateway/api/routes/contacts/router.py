"""Endpoints de contatos."""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes.dependencies import ServiceDep, forward
from wapi_gateway.api.routes.schemas import SaveContactBody

router = APIRouter()


@router.get("/get")
async def get_contact(service: ServiceDep, phone: str = Query(...)) -> JSONResponse:
    return await forward(service.get_contact(phone), route="contacts.get")


@router.get("/get-all")
async def get_contacts(service: ServiceDep) -> JSONResponse:
    return await forward(service.get_contacts(), route="contacts.get_all")


@router.get("/check")
async def check_contact(service: ServiceDep, phone: str = Query(...)) -> JSONResponse:
    return await forward(service.check_contact(phone), route="contacts.check")


@router.post("/save")
async def save_contact(body: SaveContactBody, service: ServiceDep) -> JSONResponse:
    return await forward(service.save_contact(body.phone, body.name), route="contacts.save")


@router.get("/get-about")
async def get_about(service: ServiceDep, phone: str = Query(...)) -> JSONResponse:
    return await forward(service.get_about(phone), route="contacts.get_about")
