"""Filters de logging: contexto do serviço e mascaramento de API key."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "***"


class ContextFilter(logging.Filter):
    """Anexa o contexto da aplicação chamadora aos records do SDK.

    `service` vem da configuração; `correlation_id` vem do getter da aplicação,
    a menos que o record já traga um via `extra`.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service = service_name
        self.correlation_id_getter = correlation_id_getter

    def _current_correlation_id(self) -> str:
        if self.correlation_id_getter is None:
            return ""
        return self.correlation_id_getter() or ""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self.service
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_correlation_id()
        return True


class ApiKeyRedactionFilter(logging.Filter):
    """Mascara API keys conhecidas na mensagem final do record.

    Nunca descarta records; apenas reescreve `msg` quando encontra a chave.
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self._secrets: set[str] = {s for s in secrets if s}

    def add_secret(self, secret: str) -> None:
        if secret:
            self._secrets.add(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        message = record.getMessage()
        redacted = message
        for secret in self._secrets:
            redacted = redacted.replace(secret, REDACTED)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
