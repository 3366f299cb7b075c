"""Helpers de logging para chamadas à Evolution API (sem API key nem payload)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(
    method: str,
    path_template: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    """Loga request concluído. Usa o template para não expor números/JIDs."""
    logger.debug(
        "evolution_request_completed",
        extra={
            "method": method,
            "path": path_template,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_unresolved_placeholders(
    method: str,
    path_template: str,
    placeholders: list[str],
) -> None:
    """Loga placeholders que ficaram sem valor no template."""
    logger.warning(
        "url_template_unresolved",
        extra={
            "method": method,
            "path": path_template,
            "placeholders": placeholders,
        },
    )
