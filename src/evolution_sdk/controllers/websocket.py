"""Controller de configuração de Websocket (`/websocket/*`)."""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.base import Payload, dump_payload


def build_websocket_payload(config: Payload) -> dict[str, Any]:
    """Envolve a configuração em `{"websocket": {...}}` se ainda não estiver."""
    data = dump_payload(config)
    if "websocket" in data:
        return data
    return {"websocket": data}


class WebsocketController(BaseController):
    async def set(self, config: Payload, instance_name: str | None = None) -> dict[str, Any]:
        """Ativa/desativa o websocket e define os eventos emitidos.

        Args:
            config: WebsocketConfig, dict `{enabled, events}` ou já envolvido
                em `{"websocket": {...}}`.
        """
        return await self._instance_request(
            "POST",
            "/websocket/set/:instance",
            instance_name,
            json=build_websocket_payload(config),
        )

    async def find(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._instance_request("GET", "/websocket/find/:instance", instance_name)
