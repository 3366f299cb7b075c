"""Controller de instâncias (`/instance/*`)."""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.base import Payload, dump_payload
from evolution_sdk.models.instance import Presence


class InstanceController(BaseController):
    """Ciclo de vida das instâncias (sessões WhatsApp)."""

    async def fetch_all(self) -> list[dict[str, Any]]:
        """Lista todas as instâncias do servidor."""
        return await self._request("GET", "/instance/fetchInstances")

    async def create(self, options: Payload) -> dict[str, Any]:
        """Cria uma instância.

        Args:
            options: CreateInstanceOptions ou dict equivalente.
        """
        return await self._request("POST", "/instance/create", json=dump_payload(options))

    async def connect(self, instance_name: str | None = None) -> dict[str, Any]:
        """Inicia conexão; devolve QR code / código de pareamento."""
        return await self._instance_request("GET", "/instance/connect/:instance", instance_name)

    async def connection_state(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._instance_request(
            "GET", "/instance/connectionState/:instance", instance_name
        )

    async def restart(self, instance_name: str | None = None) -> Any:
        return await self._instance_request(
            "PUT", "/instance/restart/:instance", instance_name, json={}
        )

    async def logout(self, instance_name: str | None = None) -> Any:
        return await self._instance_request("GET", "/instance/logout/:instance", instance_name)

    async def delete(self, instance_name: str | None = None) -> Any:
        return await self._instance_request("DELETE", "/instance/delete/:instance", instance_name)

    async def set_presence(
        self,
        presence: Presence,
        instance_name: str | None = None,
    ) -> Any:
        """Define presença global da instância (available, unavailable...)."""
        return await self._instance_request(
            "POST",
            "/instance/setPresence/:instance",
            instance_name,
            json={"presence": presence},
        )
