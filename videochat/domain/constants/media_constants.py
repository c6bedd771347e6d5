"""
Shared constants for video uploads and provider calls.

Used by the media store, the API controllers and the Gemini gateway.
Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Video uploads
# -----------------------------------------------------------------------------
ALLOWED_UPLOAD_MIME_TYPES = frozenset({"video/mp4", "video/webm", "video/quicktime"})

# Every mime type a stored asset may carry (AVI files reach the remote
# analysis path through an explicit video path).
VIDEO_MIME_TYPES = frozenset(ALLOWED_UPLOAD_MIME_TYPES | {"video/x-msvideo"})

EXTENSION_TO_MIME = {
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
}

MIME_TO_EXTENSION = {
    "video/mp4": ".mp4",
    "video/webm": ".webm",
    "video/quicktime": ".mov",
    "video/x-msvideo": ".avi",
}

DEFAULT_VIDEO_MIME = "video/mp4"

UPLOAD_CHUNK_BYTES = 1024 * 1024
UPLOAD_FIELD_NAME = "video"

# -----------------------------------------------------------------------------
# Chat
# -----------------------------------------------------------------------------
CHAT_HISTORY_LIMIT = 5


def mime_type_for(filename: str) -> str:
    """Guess a video mime type from a file extension (defaults to mp4)."""
    dot = filename.rfind(".")
    ext = filename[dot:].lower() if dot != -1 else ""
    return EXTENSION_TO_MIME.get(ext, DEFAULT_VIDEO_MIME)
