"""Serviço W-API: operações de instância, mensagens, contatos, chats e grupos.

Compõe rate limiter, cache de leituras, executor e health poller para uma
instância. Cada operação é uma única requisição à W-API e devolve o JSON
do fornecedor como veio.

Uso:
    service = create_wapi_service(settings)
    async with service:
        await service.send_text("5511999999999@c.us", "Olá")
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from wapi_gateway.app.services.events import EventBus
from wapi_gateway.app.services.health_poller import ConnectionState, HealthPoller
from wapi_gateway.app.services.rate_limiter import SlidingWindowRateLimiter
from wapi_gateway.app.services.request_executor import RequestExecutor
from wapi_gateway.app.services.response_cache import ResponseCache
from wapi_gateway.utils.errors import ConfigError
from wapi_gateway.utils.phone import prepare_phone

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from wapi_gateway.app.protocols import WapiTransportProtocol
    from wapi_gateway.config.settings import WapiSettings

logger = logging.getLogger(__name__)


class WapiService:
    """Fachada de uma instância W-API.

    Args:
        settings: Configuração imutável da instância.
        transport: Transporte HTTP, direto ou via proxy local (ver
            create_wapi_service).
        events: Barramento de eventos; um novo é criado se omitido.
        clock: Relógio monotônico usado por cache e rate limiter.

    Raises:
        ConfigError: Credenciais ausentes ou settings inválidas.
    """

    def __init__(
        self,
        settings: WapiSettings,
        transport: WapiTransportProtocol,
        *,
        events: EventBus | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        errors = settings.validate()
        if errors:
            raise ConfigError(errors)

        self._settings = settings
        self._transport = transport
        self.events = events or EventBus()
        self._rate_limiter = SlidingWindowRateLimiter(
            settings.rate_limit_per_minute,
            clock=clock,
        )
        self._cache = ResponseCache(settings.cache_max_entries, clock=clock)
        self._executor = RequestExecutor(
            transport,
            self._rate_limiter,
            self._cache,
            self.events,
            cache_enabled=settings.cache_enabled,
            cache_ttl_seconds=settings.cache_ttl_seconds,
            logging_enabled=settings.logging_enabled,
        )
        self._poller = HealthPoller(
            self._fetch_status_uncached,
            self.events,
            interval_ms=settings.health_check_interval_ms,
        )
        self._started = False

        if settings.cache_enabled and settings.cache_max_entries == 0:
            logger.warning(
                "response_cache_unbounded",
                extra={"hint": "defina WAPI_CACHE_MAX_ENTRIES para limitar o cache"},
            )

    # ── Ciclo de vida ──────────────────────────────────────────────────────

    async def start(self) -> None:
        """Inicia o health poller quando habilitado."""
        if self._settings.health_check_enabled:
            self._poller.start()
        self._started = True
        logger.info(
            "wapi_service_started",
            extra={
                "direct_mode": self._settings.direct_mode,
                "health_check_enabled": self._settings.health_check_enabled,
                "cache_enabled": self._settings.cache_enabled,
                "rate_limit_per_minute": self._settings.rate_limit_per_minute,
            },
        )

    async def shutdown(self) -> None:
        """Para o poller, limpa o cache e fecha o transporte.

        Requisições em andamento terminam normalmente.
        """
        await self._poller.stop()
        self._cache.invalidate_all()
        await self.events.drain()
        await self._transport.aclose()
        self._started = False
        logger.info("wapi_service_stopped")

    async def __aenter__(self) -> WapiService:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    # ── Estado ─────────────────────────────────────────────────────────────

    @property
    def settings(self) -> WapiSettings:
        return self._settings

    @property
    def connection_state(self) -> ConnectionState:
        return self._poller.state

    @property
    def is_connected(self) -> bool:
        return self._poller.state.connected

    @property
    def started(self) -> bool:
        return self._started

    def clear_cache(self) -> None:
        self._cache.invalidate_all()

    async def check_health(self) -> ConnectionState:
        """Executa um tick do poller sob demanda."""
        return await self._poller.tick()

    async def _fetch_status_uncached(self) -> Any:
        return await self._executor.execute("/instance/device", "GET", bypass_cache=True)

    def _phone(self, phone: str) -> str:
        return prepare_phone(
            phone,
            enabled=self._settings.normalize_phones,
            suffix=self._settings.phone_suffix,
        )

    def _phones(self, phones: Sequence[str]) -> list[str]:
        return [self._phone(p) for p in phones]

    # ── Instância ──────────────────────────────────────────────────────────

    async def get_status(self) -> Any:
        return await self._executor.execute("/instance/device", "GET")

    async def get_qr_code(self) -> Any:
        return await self._executor.execute("/instance/qr-code", "GET")

    async def connect(self) -> Any:
        return await self._executor.execute("/instance/connect", "POST")

    async def disconnect(self) -> Any:
        return await self._executor.execute("/instance/disconnect", "POST")

    async def restart(self) -> Any:
        return await self._executor.execute("/instance/restart", "POST")

    async def logout(self) -> Any:
        return await self._executor.execute("/instance/logout", "POST")

    # ── Mensagens ──────────────────────────────────────────────────────────

    async def send_text(
        self,
        phone: str,
        message: str,
        options: dict[str, Any] | None = None,
    ) -> Any:
        return await self._executor.execute(
            "/message/send-text",
            "POST",
            {"phone": self._phone(phone), "message": message, "options": options or {}},
        )

    async def send_image(
        self,
        phone: str,
        image: str,
        caption: str = "",
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Envia imagem (URL ou base64)."""
        return await self._executor.execute(
            "/message/send-image",
            "POST",
            {
                "phone": self._phone(phone),
                "image": image,
                "caption": caption,
                "options": options or {},
            },
        )

    async def send_document(
        self,
        phone: str,
        document: str,
        filename: str,
        caption: str = "",
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Envia documento (URL ou base64) com nome de arquivo."""
        return await self._executor.execute(
            "/message/send-document",
            "POST",
            {
                "phone": self._phone(phone),
                "document": document,
                "filename": filename,
                "caption": caption,
                "options": options or {},
            },
        )

    async def send_audio(
        self,
        phone: str,
        audio: str,
        options: dict[str, Any] | None = None,
    ) -> Any:
        return await self._executor.execute(
            "/message/send-audio",
            "POST",
            {"phone": self._phone(phone), "audio": audio, "options": options or {}},
        )

    async def send_video(
        self,
        phone: str,
        video: str,
        caption: str = "",
        options: dict[str, Any] | None = None,
    ) -> Any:
        return await self._executor.execute(
            "/message/send-video",
            "POST",
            {
                "phone": self._phone(phone),
                "video": video,
                "caption": caption,
                "options": options or {},
            },
        )

    async def send_location(
        self,
        phone: str,
        latitude: float,
        longitude: float,
        name: str = "",
        address: str = "",
        options: dict[str, Any] | None = None,
    ) -> Any:
        return await self._executor.execute(
            "/message/send-location",
            "POST",
            {
                "phone": self._phone(phone),
                "latitude": latitude,
                "longitude": longitude,
                "name": name,
                "address": address,
                "options": options or {},
            },
        )

    async def send_contact(
        self,
        phone: str,
        contact: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Envia cartão de contato."""
        return await self._executor.execute(
            "/message/send-contact",
            "POST",
            {"phone": self._phone(phone), "contact": contact, "options": options or {}},
        )

    async def send_buttons(
        self,
        phone: str,
        message: str,
        buttons: list[dict[str, Any]],
        options: dict[str, Any] | None = None,
    ) -> Any:
        return await self._executor.execute(
            "/message/send-button",
            "POST",
            {
                "phone": self._phone(phone),
                "message": message,
                "buttons": buttons,
                "options": options or {},
            },
        )

    async def send_list(
        self,
        phone: str,
        message: str,
        list_: dict[str, Any],
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Envia mensagem de lista (campo `list` no corpo)."""
        return await self._executor.execute(
            "/message/send-list",
            "POST",
            {
                "phone": self._phone(phone),
                "message": message,
                "list": list_,
                "options": options or {},
            },
        )

    async def reply(
        self,
        message_id: str,
        message: str,
        options: dict[str, Any] | None = None,
    ) -> Any:
        """Responde a uma mensagem existente."""
        return await self._executor.execute(
            "/message/reply",
            "POST",
            {"messageId": message_id, "message": message, "options": options or {}},
        )

    # ── Contatos ───────────────────────────────────────────────────────────

    async def get_contact(self, phone: str) -> Any:
        return await self._executor.execute("/contacts/get", "GET", {"phone": self._phone(phone)})

    async def get_contacts(self) -> Any:
        return await self._executor.execute("/contacts/get-all", "GET")

    async def check_contact(self, phone: str) -> Any:
        """Verifica se o número é um usuário WhatsApp válido."""
        return await self._executor.execute("/contacts/check", "GET", {"phone": self._phone(phone)})

    async def save_contact(self, phone: str, name: str) -> Any:
        return await self._executor.execute(
            "/contacts/save",
            "POST",
            {"phone": self._phone(phone), "name": name},
        )

    async def get_about(self, phone: str) -> Any:
        """Recado/status do contato."""
        return await self._executor.execute(
            "/contacts/get-about",
            "GET",
            {"phone": self._phone(phone)},
        )

    # ── Chats ──────────────────────────────────────────────────────────────

    async def get_chat(self, phone: str) -> Any:
        return await self._executor.execute("/chats/get", "GET", {"phone": self._phone(phone)})

    async def get_chats(self) -> Any:
        return await self._executor.execute("/chats/get-all", "GET")

    async def archive_chat(self, phone: str) -> Any:
        return await self._chat_action("archive", phone)

    async def unarchive_chat(self, phone: str) -> Any:
        return await self._chat_action("unarchive", phone)

    async def clear_chat(self, phone: str) -> Any:
        return await self._chat_action("clear", phone)

    async def delete_chat(self, phone: str) -> Any:
        return await self._chat_action("delete", phone)

    async def pin_chat(self, phone: str) -> Any:
        return await self._chat_action("pin", phone)

    async def unpin_chat(self, phone: str) -> Any:
        return await self._chat_action("unpin", phone)

    async def _chat_action(self, action: str, phone: str) -> Any:
        return await self._executor.execute(
            f"/chats/{action}",
            "POST",
            {"phone": self._phone(phone)},
        )

    # ── Grupos ─────────────────────────────────────────────────────────────

    async def create_group(self, name: str, participants: Sequence[str]) -> Any:
        return await self._executor.execute(
            "/groups/create",
            "POST",
            {"name": name, "participants": self._phones(participants)},
        )

    async def get_group(self, group_id: str) -> Any:
        return await self._executor.execute("/groups/get", "GET", {"groupId": group_id})

    async def update_group_participants(
        self,
        group_id: str,
        participants: Sequence[str],
        action: str,
    ) -> Any:
        return await self._executor.execute(
            "/groups/update-participants",
            "POST",
            {
                "groupId": group_id,
                "participants": self._phones(participants),
                "action": action,
            },
        )

    async def update_group_settings(self, group_id: str, settings: dict[str, Any]) -> Any:
        return await self._executor.execute(
            "/groups/update-settings",
            "POST",
            {"groupId": group_id, "settings": settings},
        )

    async def leave_group(self, group_id: str) -> Any:
        return await self._executor.execute("/groups/leave", "POST", {"groupId": group_id})

    async def get_group_invite_code(self, group_id: str) -> Any:
        return await self._executor.execute("/groups/invite-code", "GET", {"groupId": group_id})
