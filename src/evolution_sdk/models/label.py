"""Modelos de etiquetas (`/label/*`)."""

from __future__ import annotations

from typing import Literal

from evolution_sdk.models.base import EvolutionModel

LabelAction = Literal["add", "remove"]


class HandleLabelOptions(EvolutionModel):
    number: str
    label_id: str
    action: LabelAction
