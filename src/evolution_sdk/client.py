"""Fachada do SDK: `EvolutionClient`.

Agrupa configuração, cliente HTTP e controllers:

    async with EvolutionClient(
        base_url="https://evo.example.com",
        api_key="...",
        instance_name="minha-instancia",
    ) as client:
        await client.message.send_text({"number": "5511999999999", "text": "Olá"})

Trocar API key ou base URL reconstrói o cliente HTTP e os controllers. Requests
em andamento terminam no cliente HTTP anterior, com a configuração antiga; ele
é fechado assim que o último deles termina (ou no próximo ciclo do event loop,
se estiver ocioso). Controllers obtidos antes da troca deixam de aceitar
requests. A nova configuração vale apenas para requests emitidos depois dela.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from evolution_sdk.config.settings import (
    API_KEY_HEADER,
    EvolutionSettings,
    get_evolution_settings,
)
from evolution_sdk.connectors.http_base import EvolutionHttpClient, RequestHook
from evolution_sdk.controllers.base import ControllerContext
from evolution_sdk.controllers.chat import ChatController
from evolution_sdk.controllers.group import GroupController
from evolution_sdk.controllers.instance import InstanceController
from evolution_sdk.controllers.label import LabelController
from evolution_sdk.controllers.message import MessageController
from evolution_sdk.controllers.profile import ProfileController
from evolution_sdk.controllers.settings import SettingsController
from evolution_sdk.controllers.websocket import WebsocketController

logger = logging.getLogger(__name__)


class EvolutionClient:
    """Cliente da Evolution API v2.

    Attributes:
        instance: InstanceController
        chat: ChatController
        group: GroupController
        profile: ProfileController
        settings: SettingsController
        message: MessageController
        label: LabelController
        websocket: WebsocketController
    """

    def __init__(
        self,
        settings: EvolutionSettings | None = None,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        instance_name: str | None = None,
        headers: dict[str, str] | None = None,
        request_hooks: Sequence[RequestHook] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            settings: Configuração base. Se None, usa EvolutionSettings() vazia.
            base_url: Sobrescreve settings.base_url
            api_key: Sobrescreve settings.api_key
            instance_name: Sobrescreve a instância padrão
            headers: Headers extras (vencem os padrão)
            request_hooks: Substitui a cadeia de hooks padrão do cliente HTTP
            transport: Transporte httpx customizado (ex.: MockTransport em testes)
        """
        overrides: dict[str, Any] = {
            "base_url": base_url,
            "api_key": api_key,
            "instance_name": instance_name,
            "headers": headers,
        }
        settings = settings or EvolutionSettings()
        changes = {key: value for key, value in overrides.items() if value is not None}
        if changes:
            settings = settings.with_changes(**changes)

        self._request_hooks = request_hooks
        self._transport = transport
        self._default_instance: str | None = None
        self._retired: list[EvolutionHttpClient] = []
        self._bind(settings)

    @classmethod
    def from_env(cls, **kwargs: Any) -> EvolutionClient:
        """Cria cliente a partir de EVOLUTION_HOST / EVOLUTION_API_KEY / EVOLUTION_INSTANCE."""
        return cls(get_evolution_settings(), **kwargs)

    def _bind(self, settings: EvolutionSettings) -> None:
        self._settings = settings
        self._http = EvolutionHttpClient(
            settings,
            request_hooks=self._request_hooks,
            transport=self._transport,
        )
        context = ControllerContext(
            http=self._http,
            default_instance=settings.instance_name,
            get_default_instance=lambda: self._default_instance,
        )
        self.instance = InstanceController(context)
        self.chat = ChatController(context)
        self.group = GroupController(context)
        self.profile = ProfileController(context)
        self.settings = SettingsController(context)
        self.message = MessageController(context)
        self.label = LabelController(context)
        self.websocket = WebsocketController(context)
        logger.debug(
            "evolution_client_bound",
            extra={"base_url": settings.base_url, "instance": settings.instance_name},
        )

    def _rebind(self, settings: EvolutionSettings) -> None:
        self._http.retire()
        self._retired = [http for http in self._retired if not http.released]
        self._retired.append(self._http)
        self._bind(settings)

    @property
    def config(self) -> EvolutionSettings:
        """Configuração atualmente associada (imutável)."""
        return self._settings

    @property
    def http(self) -> EvolutionHttpClient:
        return self._http

    @property
    def default_instance(self) -> str | None:
        """Instância usada quando o método não recebe uma."""
        return self._default_instance or self._settings.instance_name

    def set_default_instance(self, instance_name: str | None) -> None:
        """Troca a instância padrão; vale para as próximas chamadas."""
        self._default_instance = instance_name or None

    def set_api_key(self, api_key: str) -> None:
        """Reassocia o cliente a uma nova API key.

        Um `apikey` passado em `headers` é descartado para não mascarar a nova chave.
        """
        headers = {
            name: value
            for name, value in self._settings.headers.items()
            if name.lower() != API_KEY_HEADER
        }
        self._rebind(self._settings.with_changes(api_key=api_key, headers=headers))

    def set_base_url(self, base_url: str) -> None:
        """Reassocia o cliente a uma nova base URL."""
        self._rebind(self._settings.with_changes(base_url=base_url))

    def with_settings(self, **changes: Any) -> EvolutionClient:
        """Novo cliente independente com a configuração alterada."""
        settings = self._settings.with_changes(**changes)
        clone = EvolutionClient(
            settings,
            request_hooks=self._request_hooks,
            transport=self._transport,
        )
        if "instance_name" not in changes:
            clone.set_default_instance(self._default_instance)
        return clone

    async def aclose(self) -> None:
        """Fecha o cliente HTTP atual e os substituídos por reassociação."""
        for http in [*self._retired, self._http]:
            await http.aclose()
        self._retired.clear()

    async def __aenter__(self) -> EvolutionClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
