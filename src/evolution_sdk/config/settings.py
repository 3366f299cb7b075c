"""Settings do cliente Evolution API.

Configuração imutável: uma vez associada a um cliente, alterações geram um
novo objeto (`with_changes`) em vez de mutar o existente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Any

from evolution_sdk.utils.errors import EvolutionConfigurationError

API_KEY_HEADER: str = "apikey"
DEFAULT_SERVICE_NAME: str = "evolution_sdk"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class EvolutionSettings:
    """Configurações do cliente.

    Attributes:
        base_url: URL base da Evolution API (ex: https://evo.example.com)
        api_key: Chave enviada no header `apikey`
        instance_name: Instância padrão quando o método não recebe uma
        headers: Headers extras; vencem os headers padrão
        request_timeout_seconds: Timeout por request. None mantém o default do httpx
        strict_url_templates: Falha se sobrar placeholder `:nome` sem valor
        service_name: Campo `service` dos logs (ver configure_logging_from_settings)
    """

    base_url: str = ""
    api_key: str = ""
    instance_name: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    request_timeout_seconds: float | None = None
    strict_url_templates: bool = False
    service_name: str = DEFAULT_SERVICE_NAME

    def default_headers(self) -> dict[str, str]:
        """Headers padrão mesclados com os extras (extras vencem)."""
        merged = {
            "Content-Type": "application/json",
            API_KEY_HEADER: self.api_key,
        }
        merged.update(self.headers)
        return merged

    def with_changes(self, **changes: Any) -> EvolutionSettings:
        """Retorna cópia com os campos alterados."""
        return replace(self, **changes)

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("EVOLUTION_HOST não configurado")
        elif not self.base_url.lower().startswith(("http://", "https://")):
            errors.append("EVOLUTION_HOST deve começar com http:// ou https://")

        if not self.api_key:
            errors.append("EVOLUTION_API_KEY não configurado")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("EVOLUTION_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise EvolutionConfigurationError(f"{name} deve ser numérico (recebido: {raw!r})") from exc


def _load_from_env() -> EvolutionSettings:
    """Carrega EvolutionSettings a partir de variáveis de ambiente."""
    return EvolutionSettings(
        base_url=os.getenv("EVOLUTION_HOST", ""),
        api_key=os.getenv("EVOLUTION_API_KEY", ""),
        instance_name=os.getenv("EVOLUTION_INSTANCE") or None,
        request_timeout_seconds=_parse_optional_float("EVOLUTION_REQUEST_TIMEOUT_SECONDS"),
        strict_url_templates=(
            os.getenv("EVOLUTION_STRICT_URL_TEMPLATES", "").strip().lower() in _TRUTHY
        ),
        service_name=os.getenv("EVOLUTION_SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )


@lru_cache(maxsize=1)
def get_evolution_settings() -> EvolutionSettings:
    """Retorna instância cacheada de EvolutionSettings lida do ambiente."""
    return _load_from_env()
