"""Tipos de grupos (`/group/*`)."""

from __future__ import annotations

from typing import Literal

ParticipantAction = Literal["add", "remove", "promote", "demote"]
