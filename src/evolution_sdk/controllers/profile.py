"""Controller de perfil da instância e privacidade.

Os endpoints ficam sob `/chat/*` na Evolution API.
"""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.base import Payload, dump_payload
from evolution_sdk.utils.media import prepare_media


class ProfileController(BaseController):
    async def fetch_profile(
        self,
        number: str,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Perfil de um contato (nome, status, foto, dados business)."""
        return await self._instance_request(
            "POST",
            "/chat/fetchProfile/:instance",
            instance_name,
            json={"number": number},
        )

    async def update_picture(
        self,
        picture: str,
        instance_name: str | None = None,
    ) -> Any:
        """Atualiza foto de perfil. Aceita URL ou base64 (prefixo data URI removido)."""
        return await self._instance_request(
            "POST",
            "/chat/updateProfilePicture/:instance",
            instance_name,
            json={"picture": prepare_media(picture)},
        )

    async def remove_picture(self, instance_name: str | None = None) -> Any:
        return await self._instance_request(
            "DELETE", "/chat/removeProfilePicture/:instance", instance_name
        )

    async def update_name(self, name: str, instance_name: str | None = None) -> Any:
        return await self._instance_request(
            "POST",
            "/chat/updateProfileName/:instance",
            instance_name,
            json={"name": name},
        )

    async def update_status(self, status: str, instance_name: str | None = None) -> Any:
        return await self._instance_request(
            "POST",
            "/chat/updateProfileStatus/:instance",
            instance_name,
            json={"status": status},
        )

    async def get_privacy(self, instance_name: str | None = None) -> dict[str, Any]:
        return await self._instance_request(
            "GET", "/chat/fetchPrivacySettings/:instance", instance_name
        )

    async def update_privacy(
        self,
        privacy_settings: Payload,
        instance_name: str | None = None,
    ) -> Any:
        """Atualiza privacidade.

        Args:
            privacy_settings: PrivacySettings ou dict equivalente.
        """
        return await self._instance_request(
            "PUT",
            "/chat/updatePrivacySettings/:instance",
            instance_name,
            json={"privacySettings": dump_payload(privacy_settings)},
        )
