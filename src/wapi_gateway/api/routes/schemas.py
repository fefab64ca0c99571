"""Corpos de requisição das rotas do proxy.

Nomes de campo iguais aos da W-API (camelCase via alias). Campos extras
são aceitos e ignorados.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ProxyBody(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class _MessageBody(_ProxyBody):
    phone: str
    options: dict[str, Any] = Field(default_factory=dict)


class SendTextBody(_MessageBody):
    message: str


class SendImageBody(_MessageBody):
    image: str
    caption: str = ""


class SendDocumentBody(_MessageBody):
    document: str
    filename: str
    caption: str = ""


class SendAudioBody(_MessageBody):
    audio: str


class SendVideoBody(_MessageBody):
    video: str
    caption: str = ""


class SendLocationBody(_MessageBody):
    latitude: float
    longitude: float
    name: str = ""
    address: str = ""


class SendContactBody(_MessageBody):
    contact: dict[str, Any]


class SendButtonsBody(_MessageBody):
    message: str
    buttons: list[dict[str, Any]]


class SendListBody(_MessageBody):
    message: str
    list_: dict[str, Any] = Field(alias="list")


class ReplyBody(_ProxyBody):
    message_id: str = Field(alias="messageId")
    message: str
    options: dict[str, Any] = Field(default_factory=dict)


class PhoneBody(_ProxyBody):
    phone: str


class SaveContactBody(_ProxyBody):
    phone: str
    name: str


class CreateGroupBody(_ProxyBody):
    name: str
    participants: list[str]


class GroupIdBody(_ProxyBody):
    group_id: str = Field(alias="groupId")


class UpdateParticipantsBody(GroupIdBody):
    participants: list[str]
    action: str


class UpdateGroupSettingsBody(GroupIdBody):
    settings: dict[str, Any]
