"""Controller de chats e contatos (`/chat/*`)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from evolution_sdk.controllers.base import BaseController


class ChatController(BaseController):
    async def find_chats(
        self,
        where: Mapping[str, Any] | None = None,
        instance_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Lista chats da instância, opcionalmente filtrados por `where`."""
        body: dict[str, Any] = {}
        if where:
            body["where"] = dict(where)
        return await self._instance_request(
            "POST", "/chat/findChats/:instance", instance_name, json=body
        )

    async def find_contacts(
        self,
        where: Mapping[str, Any] | None = None,
        instance_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Lista contatos. Ex.: where={"id": "5511999999999@s.whatsapp.net"}."""
        return await self._instance_request(
            "POST",
            "/chat/findContacts/:instance",
            instance_name,
            json={"where": dict(where or {})},
        )

    async def has_whatsapp(
        self,
        numbers: Sequence[str],
        instance_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Verifica quais números possuem WhatsApp."""
        return await self._instance_request(
            "POST",
            "/chat/whatsappNumbers/:instance",
            instance_name,
            json={"numbers": list(numbers)},
        )

    async def find_messages(
        self,
        where: Mapping[str, Any] | None = None,
        *,
        page: int | None = None,
        offset: int | None = None,
        instance_name: str | None = None,
    ) -> Any:
        """Busca mensagens com paginação.

        A API pode devolver lista ou objeto paginado; o retorno segue o que o
        servidor enviar.
        """
        body: dict[str, Any] = {"where": dict(where or {})}
        if page is not None:
            body["page"] = page
        if offset is not None:
            body["offset"] = offset
        return await self._instance_request(
            "POST", "/chat/findMessages/:instance", instance_name, json=body
        )

    async def fetch_profile_picture_url(
        self,
        number: str,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._instance_request(
            "POST",
            "/chat/fetchProfilePictureUrl/:instance",
            instance_name,
            json={"number": number},
        )
