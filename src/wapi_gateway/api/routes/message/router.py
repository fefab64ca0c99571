"""Endpoints de mensagens: um POST por tipo de envio, mais /reply."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wapi_gateway.api.routes.dependencies import ServiceDep, forward
from wapi_gateway.api.routes.schemas import (
    ReplyBody,
    SendAudioBody,
    SendButtonsBody,
    SendContactBody,
    SendDocumentBody,
    SendImageBody,
    SendListBody,
    SendLocationBody,
    SendTextBody,
    SendVideoBody,
)

router = APIRouter()


@router.post("/send-text")
async def send_text(body: SendTextBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_text(body.phone, body.message, body.options),
        route="message.send_text",
    )


@router.post("/send-image")
async def send_image(body: SendImageBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_image(body.phone, body.image, body.caption, body.options),
        route="message.send_image",
    )


@router.post("/send-document")
async def send_document(body: SendDocumentBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_document(body.phone, body.document, body.filename, body.caption, body.options),
        route="message.send_document",
    )


@router.post("/send-audio")
async def send_audio(body: SendAudioBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_audio(body.phone, body.audio, body.options),
        route="message.send_audio",
    )


@router.post("/send-video")
async def send_video(body: SendVideoBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_video(body.phone, body.video, body.caption, body.options),
        route="message.send_video",
    )


@router.post("/send-location")
async def send_location(body: SendLocationBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_location(
            body.phone,
            body.latitude,
            body.longitude,
            body.name,
            body.address,
            body.options,
        ),
        route="message.send_location",
    )


@router.post("/send-contact")
async def send_contact(body: SendContactBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_contact(body.phone, body.contact, body.options),
        route="message.send_contact",
    )


@router.post("/send-button")
async def send_buttons(body: SendButtonsBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_buttons(body.phone, body.message, body.buttons, body.options),
        route="message.send_button",
    )


@router.post("/send-list")
async def send_list(body: SendListBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.send_list(body.phone, body.message, body.list_, body.options),
        route="message.send_list",
    )


@router.post("/reply")
async def reply(body: ReplyBody, service: ServiceDep) -> JSONResponse:
    return await forward(
        service.reply(body.message_id, body.message, body.options),
        route="message.reply",
    )
