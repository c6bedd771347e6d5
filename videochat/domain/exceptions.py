"""
Custom exception hierarchy for the video chat backend.

Used by the media store, the provider gateway, the analysis lifecycle and the
API layer. Every error inherits from VideoChatError, carries a user-facing
message and the HTTP status it maps to at the API boundary.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class VideoChatError(Exception):
    """Base exception for all video chat errors."""

    http_status: int = 500

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Input and storage
# -----------------------------------------------------------------------------


class ValidationError(VideoChatError):
    """Raised for bad input: missing field, disallowed mime type, empty file."""

    http_status = 400


class StorageError(VideoChatError):
    """Raised when an upload exceeds the size ceiling or cannot be written."""

    http_status = 400


class NotFoundError(VideoChatError):
    """Raised when referenced media or a session does not exist."""

    http_status = 404


# -----------------------------------------------------------------------------
# Provider
# -----------------------------------------------------------------------------


class ProviderError(VideoChatError):
    """Raised when the AI provider call fails or the gateway is not initialized."""

    http_status = 500


class ProcessingFailedError(ProviderError):
    """Raised when a remote file leaves PROCESSING in a state other than ACTIVE."""

    def __init__(self, file_name: str, last_state: str):
        super().__init__(
            f"Video processing failed - State: {last_state}",
            details={"file": file_name, "state": last_state},
        )
        self.file_name = file_name
        self.last_state = last_state


class ProcessingTimeoutError(ProviderError):
    """Raised when a remote file is still PROCESSING after the last poll."""

    def __init__(self, file_name: str, last_state: str, attempts: int):
        super().__init__(
            f"Video processing timed out after {attempts} attempts - State: {last_state}",
            details={"file": file_name, "state": last_state, "attempts": attempts},
        )
        self.file_name = file_name
        self.last_state = last_state
        self.attempts = attempts


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so unexpected internals are never exposed.
    """
    if isinstance(exc, VideoChatError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong!"
