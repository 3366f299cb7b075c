"""Formatter JSON para logs do SDK.

Campos sempre presentes: asctime, level, logger, message, service,
correlation_id.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos padronizados.

    Campos passados via `extra` (ex: method, path, status_code) são anexados
    ao JSON automaticamente.
    """
    format_string = " ".join(f"%({name})s" for name in LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
