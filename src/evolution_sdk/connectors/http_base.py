"""Cliente HTTP base para a Evolution API.

Envolve `httpx.AsyncClient` com:
- base URL e headers padrão (Content-Type, apikey) mesclados com extras
- cadeia de hooks executada antes do envio (padrão: resolução de `:placeholders`)
- `raise_for_status` em toda resposta

Sem retries: a política de reenvio fica com a aplicação.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import httpx

from evolution_sdk.config.settings import EvolutionSettings
from evolution_sdk.connectors.http_logging import (
    log_request_completed,
    log_unresolved_placeholders,
)
from evolution_sdk.connectors.url_template import (
    find_unresolved_placeholders,
    resolve_url_template,
)
from evolution_sdk.utils.errors import (
    EvolutionConfigurationError,
    UnresolvedPlaceholderError,
)


@dataclass(frozen=True)
class OutgoingRequest:
    """Request ainda não enviado, visto pelos hooks.

    `path_template` guarda o caminho original para logging.
    """

    method: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    json: Any = None
    path_template: str = ""


RequestHook = Callable[[OutgoingRequest], OutgoingRequest]


def make_url_template_hook(strict: bool = False) -> RequestHook:
    """Cria o hook que resolve `:placeholders` a partir de `params`.

    Args:
        strict: Se True, placeholders sem valor levantam
            UnresolvedPlaceholderError antes do envio.
    """

    def url_template_hook(request: OutgoingRequest) -> OutgoingRequest:
        unresolved = find_unresolved_placeholders(request.path, request.params)
        path, remaining = resolve_url_template(request.path, request.params)
        if unresolved:
            if strict:
                raise UnresolvedPlaceholderError(request.path, unresolved)
            log_unresolved_placeholders(request.method, request.path_template, unresolved)
        return replace(request, path=path, params=remaining)

    return url_template_hook


def build_async_client(
    settings: EvolutionSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria `httpx.AsyncClient` com base URL e headers da configuração.

    O timeout só é definido se configurado; caso contrário vale o do httpx.
    """
    kwargs: dict[str, Any] = {}
    if settings.request_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.request_timeout_seconds)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers=settings.default_headers(),
        transport=transport,
        **kwargs,
    )


class EvolutionHttpClient:
    """Cliente HTTP com hooks de request para a Evolution API.

    A configuração é fixada na construção. Para trocar API key ou base URL,
    crie outro cliente; requests em andamento seguem com a configuração antiga.
    """

    def __init__(
        self,
        settings: EvolutionSettings,
        *,
        request_hooks: Sequence[RequestHook] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        if request_hooks is None:
            request_hooks = [make_url_template_hook(settings.strict_url_templates)]
        self._request_hooks: tuple[RequestHook, ...] = tuple(request_hooks)
        self._client = build_async_client(settings, transport=transport)
        self._in_flight = 0
        self._retired = False
        self._close_task: asyncio.Task[None] | None = None

    @property
    def settings(self) -> EvolutionSettings:
        return self._settings

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    @property
    def released(self) -> bool:
        """Fechado e sem fechamento pendente."""
        return self.is_closed and (self._close_task is None or self._close_task.done())

    @property
    def in_flight(self) -> int:
        """Requests enviados e ainda sem resposta."""
        return self._in_flight

    def retire(self) -> None:
        """Marca o cliente como substituído.

        Sem requests em andamento, o fechamento é agendado no event loop
        corrente; caso contrário o último request a terminar fecha o cliente.
        Fora de um event loop, o fechamento fica para `aclose()`.
        """
        self._retired = True
        if self._in_flight:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._close_task = loop.create_task(self.aclose())

    def prepare(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> OutgoingRequest:
        """Aplica os hooks e devolve o request final, sem enviar.

        Exceções levantadas por hooks propagam sem alteração.
        """
        request = OutgoingRequest(
            method=method.upper(),
            path=path,
            params=dict(params or {}),
            json=json,
            path_template=path,
        )
        for hook in self._request_hooks:
            request = hook(request)
        return request

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Envia o request e devolve a resposta 2xx.

        Raises:
            EvolutionConfigurationError: base_url ausente ou cliente já substituído.
            httpx.HTTPStatusError: resposta não-2xx.
            httpx.RequestError: falha de transporte.
        """
        if not self._settings.base_url:
            raise EvolutionConfigurationError(
                "base_url é obrigatório. Configure EVOLUTION_HOST ou passe base_url."
            )
        if self._retired:
            raise EvolutionConfigurationError(
                "Cliente HTTP substituído após troca de configuração; "
                "use os controllers atuais do EvolutionClient."
            )

        outgoing = self.prepare(method, path, params=params, json=json)
        started = time.perf_counter()
        self._in_flight += 1
        try:
            response = await self._client.request(
                outgoing.method,
                outgoing.path,
                params=outgoing.params or None,
                json=outgoing.json,
            )
        finally:
            self._in_flight -= 1
            if self._retired and not self._in_flight:
                await self._client.aclose()
        log_request_completed(
            outgoing.method,
            outgoing.path_template,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        response.raise_for_status()
        return response

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", path, params=params, json=json)

    async def put(
        self,
        path: str,
        json: Any = None,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        return await self.request("DELETE", path, params=params)

    async def aclose(self) -> None:
        await self._client.aclose()
        if self._close_task is not None and self._close_task is not asyncio.current_task():
            await self._close_task

    async def __aenter__(self) -> EvolutionHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
