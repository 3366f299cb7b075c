"""Controller de configurações por instância.

Cobre os blocos settings, webhook, websocket, rabbitmq, chatwoot e typebot,
todos no formato `/<bloco>/find/:instance` e `/<bloco>/set/:instance`.
"""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.controllers.websocket import build_websocket_payload
from evolution_sdk.models.base import Payload, dump_payload


class SettingsController(BaseController):
    async def _find(self, block: str, instance_name: str | None) -> dict[str, Any]:
        return await self._instance_request("GET", f"/{block}/find/:instance", instance_name)

    async def _set(
        self,
        block: str,
        data: dict[str, Any],
        instance_name: str | None,
    ) -> dict[str, Any]:
        return await self._instance_request(
            "POST", f"/{block}/set/:instance", instance_name, json=data
        )

    async def find_options(self, instance_name: str | None = None) -> dict[str, Any]:
        """Comportamento da instância (rejeitar chamadas, sempre online...)."""
        return await self._find("settings", instance_name)

    async def set_options(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("settings", dump_payload(data), instance_name)

    async def find_webhook(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._find("webhook", instance_name)

    async def set_webhook(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("webhook", dump_payload(data), instance_name)

    async def find_websocket(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._find("websocket", instance_name)

    async def set_websocket(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("websocket", build_websocket_payload(data), instance_name)

    async def find_rabbitmq(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._find("rabbitmq", instance_name)

    async def set_rabbitmq(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("rabbitmq", dump_payload(data), instance_name)

    async def find_chatwoot(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._find("chatwoot", instance_name)

    async def set_chatwoot(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("chatwoot", dump_payload(data), instance_name)

    async def find_typebot(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._find("typebot", instance_name)

    async def set_typebot(self, data: Payload, instance_name: str | None = None) -> dict[str, Any]:
        return await self._set("typebot", dump_payload(data), instance_name)

    async def change_typebot_status(
        self,
        data: Payload,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Abre, pausa ou fecha a sessão do typebot para um `remoteJid`."""
        return await self._instance_request(
            "PUT",
            "/typebot/changeStatus/:instance",
            instance_name,
            json=dump_payload(data),
        )
