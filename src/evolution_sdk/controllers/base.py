"""Base dos controllers: resolução de instância e execução de requests.

Todo método de controller:
1. resolve a instância (argumento > getter dinâmico > padrão estático)
2. envia o request com o template `/recurso/acao/:instance`
3. devolve o JSON decodificado ou levanta um erro normalizado
"""

from __future__ import annotations

import json as jsonlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from evolution_sdk.connectors.errors import normalize_error
from evolution_sdk.connectors.http_base import EvolutionHttpClient
from evolution_sdk.utils.errors import EvolutionConfigurationError

INSTANCE_REQUIRED_MESSAGE = (
    "Nome da instância é obrigatório (instance name required). "
    "Configure instance_name no cliente ou passe-o ao método."
)


@dataclass(frozen=True)
class ControllerContext:
    """Dependências compartilhadas pelos controllers.

    Attributes:
        http: Cliente HTTP já configurado
        default_instance: Instância padrão estática
        get_default_instance: Getter avaliado a cada chamada; permite trocar
            a instância padrão sem reconstruir os controllers
    """

    http: EvolutionHttpClient
    default_instance: str | None = None
    get_default_instance: Callable[[], str | None] | None = None


def resolve_instance(provided: str | None, context: ControllerContext) -> str:
    """Resolve a instância efetiva da chamada.

    Precedência: argumento explícito > getter dinâmico > padrão estático.
    Strings vazias contam como ausentes.

    Raises:
        EvolutionConfigurationError: Nenhuma instância disponível. Levantado
            antes de qualquer IO.
    """
    if provided:
        return provided
    if context.get_default_instance is not None:
        dynamic = context.get_default_instance()
        if dynamic:
            return dynamic
    if context.default_instance:
        return context.default_instance
    raise EvolutionConfigurationError(INSTANCE_REQUIRED_MESSAGE)


def decode_body(response: httpx.Response) -> Any:
    """JSON decodificado; texto puro se não for JSON; None se vazio."""
    if not response.content:
        return None
    try:
        return response.json()
    except (jsonlib.JSONDecodeError, UnicodeDecodeError):
        return response.text


class BaseController:
    """Base com helpers de request para os controllers de recurso."""

    def __init__(self, context: ControllerContext) -> None:
        self._context = context

    @property
    def http(self) -> EvolutionHttpClient:
        return self._context.http

    def _resolve_instance(self, instance_name: str | None) -> str:
        return resolve_instance(instance_name, self._context)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Executa request sem instância (ex.: /instance/fetchInstances)."""
        try:
            response = await self.http.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            normalize_error(exc)
        return decode_body(response)

    async def _instance_request(
        self,
        method: str,
        path: str,
        instance_name: str | None,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Executa request com `:instance` resolvido no template."""
        instance = self._resolve_instance(instance_name)
        bag: dict[str, Any] = {"instance": instance}
        if params:
            bag.update(params)
        return await self._request(method, path, params=bag, json=json)
