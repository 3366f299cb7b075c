"""Utilitários do SDK (mídia e exceções)."""

from .media import (
    MAX_FILE_SIZES,
    RECOMMENDED_FORMATS,
    file_to_base64,
    guess_mimetype,
    is_base64,
    is_url,
    is_valid_media_type,
    normalize_base64,
    prepare_media,
)

__all__ = [
    "MAX_FILE_SIZES",
    "RECOMMENDED_FORMATS",
    "file_to_base64",
    "guess_mimetype",
    "is_base64",
    "is_url",
    "is_valid_media_type",
    "normalize_base64",
    "prepare_media",
]
