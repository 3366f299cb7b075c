"""Logging estruturado (JSON) do SDK.

Uso:
    from evolution_sdk.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="minha_app")
    logger = get_logger(__name__)
"""

from evolution_sdk.config.logging.config import (
    SDK_LOGGER_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from evolution_sdk.config.logging.filters import ApiKeyRedactionFilter, ContextFilter
from evolution_sdk.config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "SDK_LOGGER_NAME",
    "VALID_LOG_LEVELS",
    "ApiKeyRedactionFilter",
    "ContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]
