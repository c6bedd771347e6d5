"""Constants shared across layers"""

from .media_constants import (
    ALLOWED_UPLOAD_MIME_TYPES,
    CHAT_HISTORY_LIMIT,
    DEFAULT_VIDEO_MIME,
    EXTENSION_TO_MIME,
    MIME_TO_EXTENSION,
    UPLOAD_CHUNK_BYTES,
    UPLOAD_FIELD_NAME,
    VIDEO_MIME_TYPES,
    mime_type_for,
)

__all__ = [
    "ALLOWED_UPLOAD_MIME_TYPES",
    "CHAT_HISTORY_LIMIT",
    "DEFAULT_VIDEO_MIME",
    "EXTENSION_TO_MIME",
    "MIME_TO_EXTENSION",
    "UPLOAD_CHUNK_BYTES",
    "UPLOAD_FIELD_NAME",
    "VIDEO_MIME_TYPES",
    "mime_type_for",
]
