# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..constants import VIDEO_MIME_TYPES


class ProcessingState(str, Enum):
    """Provider-side readiness of an uploaded file."""
    PROCESSING = "PROCESSING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"
    OTHER = "OTHER"

    @classmethod
    def from_provider(cls, state: Any) -> "ProcessingState":
        """Map a provider state (enum member or string) onto ProcessingState."""
        if state is None:
            return cls.OTHER
        raw = getattr(state, "name", None) or str(state)
        # str(FileState.ACTIVE) renders as "FileState.ACTIVE"
        raw = raw.upper().rsplit(".", 1)[-1]
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class MediaAsset:
    """
    An uploaded video stored on the local filesystem.
    
    local_id is the generated file name under the uploads directory.
    """
    local_id: str
    storage_path: str
    byte_size: int
    mime_type: str
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.local_id:
            raise ValueError("Media asset id is required")
        if self.byte_size <= 0:
            raise ValueError("Media asset must not be empty")
        if self.mime_type not in VIDEO_MIME_TYPES:
            raise ValueError(f"Unsupported video mime type: {self.mime_type}")


@dataclass
class RemoteFileHandle:
    """Provider-side representation of an uploaded video."""
    uri: str
    name: str
    state: ProcessingState
    mime_type: str

    @property
    def is_active(self) -> bool:
        return self.state == ProcessingState.ACTIVE


@dataclass(frozen=True)
class InlineMedia:
    """Video bytes sent inside the generation request."""
    data: bytes
    mime_type: str


@dataclass(frozen=True)
class RemoteMedia:
    """Video referenced by a previously uploaded provider file."""
    uri: str
    mime_type: str


MediaReference = Union[InlineMedia, RemoteMedia]
