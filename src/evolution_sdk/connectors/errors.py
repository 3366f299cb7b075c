"""Normalização de erros HTTP/transporte da Evolution API.

Ordem de preferência ao converter uma falha:
1. Corpo de erro estruturado da API -> EvolutionApiError
2. Resposta HTTP bruta -> EvolutionResponseError
3. Erro de transporte -> EvolutionTransportError
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import httpx

from evolution_sdk.utils.errors import (
    EvolutionApiError,
    EvolutionError,
    EvolutionResponseError,
    EvolutionTransportError,
)


def parse_error_body(response: httpx.Response) -> Any | None:
    """Decodifica o corpo de erro. None se vazio ou não-JSON."""
    if not response.content:
        return None
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if body in (None, "", {}, []):
        return None
    return body


def extract_error_message(body: Any) -> str | None:
    """Extrai mensagem legível do corpo de erro da Evolution API.

    Formatos observados:
        {"status": 400, "error": "Bad Request", "response": {"message": [...]}}
        {"message": "..."}
        {"error": "..."}
    """
    if isinstance(body, str):
        return body
    if not isinstance(body, dict):
        return None

    nested = body.get("response")
    if isinstance(nested, dict) and nested.get("message"):
        return _stringify(nested["message"])

    for key in ("message", "error"):
        if body.get(key):
            return _stringify(body[key])
    return None


def _stringify(value: Any) -> str:
    if isinstance(value, list):
        return "; ".join(_stringify(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def normalize_error(exc: BaseException) -> NoReturn:
    """Converte a falha em uma exceção do SDK e a levanta. Nunca retorna.

    Erros já normalizados (ex.: configuração) e exceções desconhecidas são
    relançados sem alteração.
    """
    if isinstance(exc, EvolutionError):
        raise exc

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        body = parse_error_body(response)
        if body is not None:
            raise EvolutionApiError(
                body,
                response=response,
                message=extract_error_message(body),
            ) from exc
        raise EvolutionResponseError(response) from exc

    if isinstance(exc, httpx.RequestError):
        raise EvolutionTransportError(exc) from exc

    raise exc
