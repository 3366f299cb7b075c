"""Configuração opcional de logging JSON para aplicações que usam o SDK.

O SDK nunca configura logging sozinho: apenas emite records via
`logging.getLogger(__name__)`. Aplicações que quiserem logs JSON chamam
`configure_logging` na inicialização.

Uso:
    from evolution_sdk.config.logging import configure_logging

    configure_logging(level="DEBUG", api_keys=[settings.api_key])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from evolution_sdk.config.logging.filters import ApiKeyRedactionFilter, ContextFilter
from evolution_sdk.config.logging.formatters import create_json_formatter
from evolution_sdk.config.settings import DEFAULT_SERVICE_NAME, EvolutionSettings

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

SDK_LOGGER_NAME = "evolution_sdk"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    api_keys: Iterable[str] = (),
    logger_name: str = SDK_LOGGER_NAME,
) -> logging.Logger:
    """Instala handler JSON no logger do SDK.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que devolve o correlation_id corrente.
        api_keys: Chaves a mascarar caso apareçam em mensagens.
        logger_name: Logger alvo. Use "" para o root logger.

    Returns:
        Logger configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_name = _validate_level(level)

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ContextFilter(service_name, correlation_id_getter))
    handler.addFilter(ApiKeyRedactionFilter(api_keys))

    target = logging.getLogger(logger_name)
    target.setLevel(level_name)
    # Um único handler por logger, mesmo com chamadas repetidas
    target.handlers = [handler]
    return target


def configure_logging_from_settings(
    settings: EvolutionSettings,
    level: str = "INFO",
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Logger:
    """Configura o logger do SDK a partir de EvolutionSettings.

    Usa `settings.service_name` (EVOLUTION_SERVICE_NAME) no campo `service` e
    mascara `settings.api_key` nas mensagens.

    Exemplo:
        configure_logging_from_settings(get_evolution_settings(), level="DEBUG")
    """
    return configure_logging(
        level=level,
        service_name=settings.service_name,
        correlation_id_getter=correlation_id_getter,
        api_keys=[settings.api_key],
    )


def _validate_level(level: str) -> str:
    level_name = level.strip().upper()
    if level_name not in VALID_LOG_LEVELS:
        allowed = ", ".join(sorted(VALID_LOG_LEVELS))
        raise ValueError(f"Nível de log inválido: {level!r} (use um de: {allowed})")
    return level_name


def get_logger(name: str) -> logging.Logger:
    """Atalho para `logging.getLogger` (geralmente com `__name__`)."""
    return logging.getLogger(name)
