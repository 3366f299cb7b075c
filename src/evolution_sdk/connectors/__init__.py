"""Conector HTTP da Evolution API.

Este pacote é o único ponto de IO do SDK:
- Cliente httpx com headers padrão e hooks de request
- Resolução de templates `:placeholder`
- Normalização de erros HTTP/transporte
"""

from .errors import extract_error_message, normalize_error, parse_error_body
from .http_base import (
    EvolutionHttpClient,
    OutgoingRequest,
    RequestHook,
    build_async_client,
    make_url_template_hook,
)
from .url_template import find_unresolved_placeholders, resolve_url_template

__all__ = [
    "EvolutionHttpClient",
    "OutgoingRequest",
    "RequestHook",
    "build_async_client",
    "extract_error_message",
    "find_unresolved_placeholders",
    "make_url_template_hook",
    "normalize_error",
    "parse_error_body",
    "resolve_url_template",
]
