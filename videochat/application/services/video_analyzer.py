"""
Video analysis over the provider gateway.

Two protocols for the same operation:
  - INLINE: read the stored bytes and send them inside one generate call.
  - REMOTE: upload to the provider Files API, wait until ACTIVE, generate
    by URI. The remote file is deleted afterwards (best-effort), also when
    processing or generation failed.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ...domain.constants import DEFAULT_VIDEO_MIME
from ...domain.exceptions import ProviderError
from ...domain.gateways.provider_gateway import ProviderGateway
from ...domain.models.chat import AnalysisResult, ChatTurnResult, HistoryEntry
from ...domain.models.generation import AnalysisProtocol, GenerationConfig
from ...domain.models.media import InlineMedia, MediaAsset, RemoteFileHandle, RemoteMedia
from ...domain.repositories.media_store import MediaStore
from .prompts import direct_chat_prompt

logger = logging.getLogger(__name__)

MediaSource = Union[MediaAsset, str]


class VideoAnalyzer:
    """Runs analysis and chat turns against one shared gateway."""

    def __init__(self, gateway: ProviderGateway, media_store: MediaStore) -> None:
        self.gateway = gateway
        self.media_store = media_store

    def analyze(
        self,
        asset: MediaAsset,
        prompt: str,
        protocol: AnalysisProtocol = AnalysisProtocol.INLINE,
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
    ) -> AnalysisResult:
        """Produce the initial analysis of a stored video."""
        logger.info("Analyzing video %s (%s)", asset.local_id, protocol.value)
        text, source_uri = self._generate(
            asset, prompt, (), protocol, generation_config, model
        )
        logger.info("Analysis completed for %s", asset.local_id)
        return AnalysisResult(text=text, source_uri=source_uri)

    def ask(
        self,
        source: MediaSource,
        question: str,
        history: Sequence[HistoryEntry] = (),
        protocol: AnalysisProtocol = AnalysisProtocol.INLINE,
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
        prompt_builder: Callable[[str], str] = direct_chat_prompt,
    ) -> ChatTurnResult:
        """
        Answer a question about a video.

        source is either a stored asset or the URI of a file already held by
        the provider; a URI is always referenced remotely.
        """
        prompt = prompt_builder(question)
        if isinstance(source, str):
            text = self.gateway.generate_content(
                RemoteMedia(uri=source, mime_type=DEFAULT_VIDEO_MIME),
                prompt,
                history,
                generation_config,
                model,
            )
        else:
            text, _ = self._generate(source, prompt, history, protocol, generation_config, model)
        logger.info("Chat response generated")
        return ChatTurnResult(text=text)

    # ------------------------------------------------------------------
    # Protocols
    # ------------------------------------------------------------------

    def _generate(
        self,
        asset: MediaAsset,
        prompt: str,
        history: Sequence[HistoryEntry],
        protocol: AnalysisProtocol,
        generation_config: Optional[GenerationConfig],
        model: Optional[str],
    ) -> tuple[str, Optional[str]]:
        data = self.media_store.resolve(asset.local_id)

        if protocol == AnalysisProtocol.INLINE:
            media = InlineMedia(data=data, mime_type=asset.mime_type)
            return self.gateway.generate_content(media, prompt, history, generation_config, model), None

        uploaded = self.gateway.upload_file(data, asset.mime_type, Path(asset.storage_path).name)
        try:
            handle = self.gateway.wait_until_active(uploaded)
            text = self.gateway.generate_content(
                RemoteMedia(uri=handle.uri, mime_type=handle.mime_type or asset.mime_type),
                prompt,
                history,
                generation_config,
                model,
            )
        finally:
            # The remote copy is removed whether or not generation succeeded
            self._delete_remote(uploaded)
        return text, handle.uri

    def _delete_remote(self, handle: RemoteFileHandle) -> None:
        try:
            self.gateway.delete_file(handle)
        except ProviderError as e:
            logger.warning("Failed to clean up file %s: %s", handle.name, e)
