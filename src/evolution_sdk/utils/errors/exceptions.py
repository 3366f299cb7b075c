"""Hierarquia de exceções do SDK.

Toda falha que chega ao chamador é uma subclasse de `EvolutionError`:

- EvolutionConfigurationError: configuração incompleta (ex.: instância ausente),
  levantada antes de qualquer IO.
- EvolutionApiError: resposta não-2xx com corpo estruturado da Evolution API.
- EvolutionResponseError: resposta não-2xx sem corpo aproveitável.
- EvolutionTransportError: falha de rede/timeout/DNS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class EvolutionError(Exception):
    """Base para todas as falhas do SDK."""


class EvolutionConfigurationError(EvolutionError, ValueError):
    """Configuração insuficiente para executar a operação."""


class UnresolvedPlaceholderError(EvolutionConfigurationError):
    """Template de URL com placeholders sem valor (modo estrito)."""

    def __init__(self, url: str, placeholders: list[str]) -> None:
        names = ", ".join(f":{name}" for name in placeholders)
        super().__init__(f"Placeholders sem valor na URL {url}: {names}")
        self.url = url
        self.placeholders = placeholders


class EvolutionApiError(EvolutionError):
    """Erro estruturado retornado pela Evolution API.

    Attributes:
        body: Corpo JSON decodificado, exatamente como recebido.
        status_code: Status HTTP da resposta.
        response: Resposta httpx original.
    """

    def __init__(
        self,
        body: Any,
        response: httpx.Response | None = None,
        message: str | None = None,
    ) -> None:
        self.body = body
        self.response = response
        self.status_code = response.status_code if response is not None else None
        self.message = message or "Erro da Evolution API"
        super().__init__(f"{self.message} (status={self.status_code})")


class EvolutionResponseError(EvolutionError):
    """Resposta HTTP de erro sem corpo estruturado."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        try:
            request = response.request
            where = f" ({request.method} {request.url.path})"
        except RuntimeError:
            # Response construída sem request associado
            where = ""
        super().__init__(f"Resposta HTTP {response.status_code} sem corpo de erro{where}")


class EvolutionTransportError(EvolutionError):
    """Falha de transporte (rede, timeout, DNS)."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Falha de transporte: {type(cause).__name__}: {cause}")
