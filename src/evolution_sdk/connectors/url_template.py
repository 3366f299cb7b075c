"""Resolução de templates de URL no formato `/recurso/acao/:instance`.

Cada `:nome` é substituído pelo valor de mesmo nome no dicionário de
parâmetros do request; chaves consumidas saem do dicionário para não virarem
query string. Placeholders sem valor permanecem literais.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER_PATTERN = re.compile(r":(\w+)")


def resolve_url_template(
    url: str,
    params: Mapping[str, Any] | None = None,
) -> tuple[str, dict[str, Any]]:
    """Substitui placeholders `:nome` por valores de `params`.

    O mapeamento recebido não é alterado; o retorno traz uma cópia apenas com
    os parâmetros não consumidos.

    Args:
        url: Caminho com zero ou mais placeholders.
        params: Valores por nome de placeholder. `None` conta como ausente.

    Returns:
        (url resolvida, parâmetros restantes)

    Exemplo:
        resolve_url_template("/instance/connect/:instance", {"instance": "a", "x": 1})
        # ("/instance/connect/a", {"x": 1})
    """
    remaining: dict[str, Any] = dict(params or {})
    if not remaining:
        return url, remaining

    consumed: set[str] = set()

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = remaining.get(name)
        if value is None:
            return match.group(0)
        consumed.add(name)
        return str(value)

    resolved = PLACEHOLDER_PATTERN.sub(_substitute, url)
    for name in consumed:
        remaining.pop(name, None)
    return resolved, remaining


def find_unresolved_placeholders(
    url: str,
    params: Mapping[str, Any] | None = None,
) -> list[str]:
    """Placeholders do template que `params` não consegue preencher.

    Avalia o template original, não a URL resolvida: valores substituídos
    podem conter `:` (ex.: JIDs de dispositivo).
    """
    params = params or {}
    return [name for name in PLACEHOLDER_PATTERN.findall(url) if params.get(name) is None]
