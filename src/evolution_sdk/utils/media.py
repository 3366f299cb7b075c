"""Helpers de mídia para envio via Evolution API.

A Evolution API espera base64 puro (sem o prefixo `data:...;base64,`) ou uma
URL http(s). Estas funções são puras e não fazem IO, exceto `file_to_base64`.
"""

from __future__ import annotations

import base64
import mimetypes
import re
from pathlib import Path
from typing import Final

_DATA_URI_PREFIX: Final = re.compile(r"^data:[^;]+;base64,", re.IGNORECASE)
_URL_PREFIX: Final = re.compile(r"^https?://", re.IGNORECASE)
_BASE64_ALPHABET: Final = re.compile(r"^[A-Za-z0-9+/]+=*$")

# Abaixo disso uma string alfanumérica é ambígua demais para ser tratada como base64
_BASE64_MIN_LENGTH: Final = 20

RECOMMENDED_FORMATS: Final[dict[str, tuple[str, ...]]] = {
    "image": ("image/png", "image/jpeg", "image/webp"),
    "video": ("video/mp4",),
    "audio": ("audio/ogg", "audio/mpeg"),
    "document": (
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ),
    "sticker": ("image/webp",),
}

MAX_FILE_SIZES: Final[dict[str, int]] = {
    "image": 5 * 1024 * 1024,  # 5MB
    "video": 16 * 1024 * 1024,  # 16MB
    "audio": 16 * 1024 * 1024,  # 16MB
    "document": 100 * 1024 * 1024,  # 100MB
    "sticker": 500 * 1024,  # 500KB
}

MEDIA_TYPES: Final = frozenset({"image", "video", "document"})


def is_url(value: str | None) -> bool:
    """Retorna True se o valor começa com http:// ou https://."""
    if not value:
        return False
    return bool(_URL_PREFIX.match(value))


def normalize_base64(value: str | None) -> str | None:
    """Remove o prefixo data URI (`data:<mime>;base64,`) se presente.

    Entradas vazias ou None são devolvidas sem alteração. A função é
    idempotente: aplicar duas vezes produz o mesmo resultado.

    Exemplo:
        normalize_base64("data:image/png;base64,iVBORw0KGgo")  # "iVBORw0KGgo"
        normalize_base64("iVBORw0KGgo")                         # "iVBORw0KGgo"
    """
    if not value:
        return value
    return _DATA_URI_PREFIX.sub("", value, count=1)


def is_base64(value: str | None) -> bool:
    """Heurística: o valor parece base64?

    Verdadeiro se tiver prefixo data URI, ou se usar apenas o alfabeto base64 e
    tiver mais de 20 caracteres. Não garante que o conteúdo decodifique.
    """
    if not value:
        return False
    if _DATA_URI_PREFIX.match(value):
        return True
    return bool(_BASE64_ALPHABET.match(value)) and len(value) > _BASE64_MIN_LENGTH


def prepare_media(value: str | None) -> str | None:
    """URL segue intacta; qualquer outro valor é normalizado como base64."""
    if is_url(value):
        return value
    return normalize_base64(value)


def is_valid_media_type(mediatype: str) -> bool:
    """Valida o campo `mediatype` de sendMedia (image, video, document)."""
    return mediatype in MEDIA_TYPES


def guess_mimetype(path: str | Path) -> str:
    """Mimetype a partir da extensão do arquivo."""
    mimetype, _ = mimetypes.guess_type(str(path))
    return mimetype or "application/octet-stream"


def file_to_base64(path: str | Path) -> str:
    """Lê um arquivo local e devolve seu conteúdo em base64 puro.

    Raises:
        FileNotFoundError: Se o arquivo não existir.
    """
    file_path = Path(path).resolve()
    if not file_path.is_file():
        raise FileNotFoundError(f"Arquivo não encontrado: {file_path}")
    return base64.b64encode(file_path.read_bytes()).decode("ascii")
