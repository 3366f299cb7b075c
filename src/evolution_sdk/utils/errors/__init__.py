"""Exceções compartilhadas do SDK."""

from .exceptions import (
    EvolutionApiError,
    EvolutionConfigurationError,
    EvolutionError,
    EvolutionResponseError,
    EvolutionTransportError,
    UnresolvedPlaceholderError,
)

__all__ = [
    "EvolutionApiError",
    "EvolutionConfigurationError",
    "EvolutionError",
    "EvolutionResponseError",
    "EvolutionTransportError",
    "UnresolvedPlaceholderError",
]
