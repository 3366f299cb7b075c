"""Controller de etiquetas (`/label/*`)."""

from __future__ import annotations

from typing import Any

from evolution_sdk.controllers.base import BaseController
from evolution_sdk.models.base import Payload, dump_payload


class LabelController(BaseController):
    async def find_labels(self, instance_name: str | None = None) -> list[dict[str, Any]]:
        return await self._instance_request("GET", "/label/findLabels/:instance", instance_name)

    async def handle_label(self, options: Payload, instance_name: str | None = None) -> Any:
        """Adiciona ou remove uma etiqueta de um chat.

        Args:
            options: HandleLabelOptions ou dict `{number, labelId, action}`.
        """
        return await self._instance_request(
            "POST",
            "/label/handleLabel/:instance",
            instance_name,
            json=dump_payload(options),
        )
