"""SDK assíncrono para a Evolution API v2 (gateway WhatsApp).

Uso básico:
    from evolution_sdk import EvolutionClient

    client = EvolutionClient(base_url=..., api_key=..., instance_name=...)
    await client.instance.connection_state()
"""

from evolution_sdk.client import EvolutionClient
from evolution_sdk.config.settings import EvolutionSettings, get_evolution_settings
from evolution_sdk.connectors.errors import normalize_error
from evolution_sdk.connectors.url_template import resolve_url_template
from evolution_sdk.controllers.base import ControllerContext, resolve_instance
from evolution_sdk.utils.errors import (
    EvolutionApiError,
    EvolutionConfigurationError,
    EvolutionError,
    EvolutionResponseError,
    EvolutionTransportError,
    UnresolvedPlaceholderError,
)
from evolution_sdk.utils.media import (
    MAX_FILE_SIZES,
    RECOMMENDED_FORMATS,
    is_base64,
    is_url,
    normalize_base64,
    prepare_media,
)

__version__ = "2.0.0"

__all__ = [
    "MAX_FILE_SIZES",
    "RECOMMENDED_FORMATS",
    "ControllerContext",
    "EvolutionApiError",
    "EvolutionClient",
    "EvolutionConfigurationError",
    "EvolutionError",
    "EvolutionResponseError",
    "EvolutionSettings",
    "EvolutionTransportError",
    "UnresolvedPlaceholderError",
    "get_evolution_settings",
    "is_base64",
    "is_url",
    "normalize_base64",
    "normalize_error",
    "prepare_media",
    "resolve_instance",
    "resolve_url_template",
]
