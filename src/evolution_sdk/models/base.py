"""Base dos modelos de request enviados à Evolution API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EvolutionModel(BaseModel):
    """Modelo com campos snake_case serializados em camelCase.

    Campos desconhecidos são aceitos e enviados como vieram: a validação real
    acontece no servidor.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Dict pronto para JSON (aliases camelCase, sem campos None)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


Payload = EvolutionModel | Mapping[str, Any]


def dump_payload(data: Payload | None) -> dict[str, Any]:
    """Aceita modelo ou mapping e devolve uma cópia em dict."""
    if data is None:
        return {}
    if isinstance(data, EvolutionModel):
        return data.to_payload()
    return dict(data)
