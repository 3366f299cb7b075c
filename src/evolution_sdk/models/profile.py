"""Modelos de perfil e privacidade."""

from __future__ import annotations

from typing import Literal

from evolution_sdk.models.base import EvolutionModel

Visibility = Literal["all", "contacts", "contact_blacklist", "none"]


class PrivacySettings(EvolutionModel):
    """Configurações de privacidade (`/chat/updatePrivacySettings`)."""

    readreceipts: Literal["all", "none"] | None = None
    profile: Visibility | None = None
    status: Visibility | None = None
    online: Literal["all", "match_last_seen"] | None = None
    last: Visibility | None = None
    groupadd: Literal["all", "contacts", "contact_blacklist"] | None = None
