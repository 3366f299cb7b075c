"""Modelos de instância (`/instance/*`)."""

from __future__ import annotations

from typing import Literal

from evolution_sdk.models.base import EvolutionModel

Presence = Literal["available", "unavailable", "composing", "recording", "paused"]

DEFAULT_INTEGRATION = "WHATSAPP-BAILEYS"


class CreateInstanceOptions(EvolutionModel):
    """Criação de instância.

    Attributes:
        instance_name: Nome único da instância
        token: Token próprio da instância (gerado pelo servidor se omitido)
        qrcode: Gera QR code já na criação
        number: Número para pareamento por código
        integration: Motor de conexão (padrão Baileys)
    """

    instance_name: str
    token: str | None = None
    qrcode: bool | None = None
    number: str | None = None
    integration: str = DEFAULT_INTEGRATION
