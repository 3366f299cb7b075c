"""Controller de grupos (`/group/*`).

O JID do grupo vai como query string (`groupJid`), não no caminho.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.group import ParticipantAction


class GroupController(BaseController):
    async def fetch_all(
        self,
        get_participants: bool = False,
        instance_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Lista grupos da instância."""
        return await self._instance_request(
            "GET",
            "/group/fetchAllGroups/:instance",
            instance_name,
            params={"getParticipants": "true" if get_participants else "false"},
        )

    async def find_by_id(
        self,
        group_jid: str,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Metadados de um grupo."""
        return await self._instance_request(
            "GET",
            "/group/findGroupInfos/:instance?groupJid=:groupJid",
            instance_name,
            params={"groupJid": group_jid},
        )

    async def find_participants(
        self,
        group_jid: str,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        return await self._instance_request(
            "GET",
            "/group/participants/:instance",
            instance_name,
            params={"groupJid": group_jid},
        )

    async def fetch_invite_code(
        self,
        group_jid: str,
        instance_name: str | None = None,
    ) -> dict[str, Any]:
        """Código de convite. Exige que a instância seja admin do grupo."""
        return await self._instance_request(
            "GET",
            "/group/inviteCode/:instance",
            instance_name,
            params={"groupJid": group_jid},
        )

    async def update_participant(
        self,
        group_jid: str,
        action: ParticipantAction,
        participants: Sequence[str],
        instance_name: str | None = None,
    ) -> Any:
        """Adiciona, remove, promove ou rebaixa participantes."""
        return await self._instance_request(
            "PUT",
            "/group/updateParticipant/:instance",
            instance_name,
            params={"groupJid": group_jid},
            json={"action": action, "participants": list(participants)},
        )
