"""Contract for the external generative-AI provider."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..models.chat import HistoryEntry
from ..models.generation import GenerationConfig
from ..models.media import MediaReference, RemoteFileHandle


class ProviderGateway(ABC):
    """
    Narrow interface over the AI provider.

    Every failure surfaces as ProviderError (or one of its processing
    subclasses). Calls are never retried and are not idempotent: calling
    again re-invokes the provider.
    """

    @abstractmethod
    def generate_content(
        self,
        media: MediaReference,
        prompt: str,
        history: Sequence[HistoryEntry] = (),
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
    ) -> str:
        """Generate text about inline or remote media."""

    @abstractmethod
    def upload_file(self, data: bytes, mime_type: str, display_name: str) -> RemoteFileHandle:
        """Submit raw bytes to the provider's file API."""

    @abstractmethod
    def wait_until_active(self, handle: RemoteFileHandle) -> RemoteFileHandle:
        """Poll the file until it is ACTIVE; raise on failure or timeout."""

    @abstractmethod
    def delete_file(self, handle: RemoteFileHandle) -> None:
        """Delete a provider-side file."""
