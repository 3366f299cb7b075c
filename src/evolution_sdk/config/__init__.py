"""Configuração do SDK (settings e logging)."""

from evolution_sdk.config.settings import (
    API_KEY_HEADER,
    DEFAULT_SERVICE_NAME,
    EvolutionSettings,
    get_evolution_settings,
)

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_SERVICE_NAME",
    "EvolutionSettings",
    "get_evolution_settings",
]
