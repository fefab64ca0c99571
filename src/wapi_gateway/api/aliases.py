"""Aliases curtos para as operações mais comuns do WapiService.

Tabela de renomeação pura: alias -> nome do método no serviço.

Uso:
    await call_alias(service, "text", "5511999999999@c.us", "Olá")
"""

from __future__ import annotations

from typing import Any

WA_ALIASES: dict[str, str] = {
    # Instância
    "status": "get_status",
    "qr": "get_qr_code",
    "connect": "connect",
    "disconnect": "disconnect",
    "restart": "restart",
    # Mensagens
    "text": "send_text",
    "image": "send_image",
    "doc": "send_document",
    "audio": "send_audio",
    "video": "send_video",
    "location": "send_location",
    "contact": "send_contact",
    "buttons": "send_buttons",
    "list": "send_list",
    "reply": "reply",
    # Contatos
    "getContact": "get_contact",
    "getContacts": "get_contacts",
    "checkContact": "check_contact",
    "saveContact": "save_contact",
    # Chats
    "getChat": "get_chat",
    "getChats": "get_chats",
    "archiveChat": "archive_chat",
    "unarchiveChat": "unarchive_chat",
    "clearChat": "clear_chat",
    "deleteChat": "delete_chat",
    # Grupos
    "createGroup": "create_group",
    "getGroup": "get_group",
    "updateGroupParticipants": "update_group_participants",
    "leaveGroup": "leave_group",
}


def resolve_alias(alias: str) -> str:
    """Retorna o nome do método para o alias.

    Raises:
        KeyError: Alias desconhecido.
    """
    try:
        return WA_ALIASES[alias]
    except KeyError:
        raise KeyError(
            f"Alias desconhecido: {alias!r}. Disponíveis: {', '.join(sorted(WA_ALIASES))}"
        ) from None


async def call_alias(service: Any, alias: str, *args: Any, **kwargs: Any) -> Any:
    """Executa no serviço a operação correspondente ao alias."""
    method = getattr(service, resolve_alias(alias))
    return await method(*args, **kwargs)
