"""
Per-session upload → analyze → chat state machine.

    Empty --upload--> Uploaded --analyze--> Analyzed --chat--> Chatting --chat--> Chatting

upload is legal from every state and starts over with the new video.
Failed analyze/chat calls leave the state untouched so the caller can retry.
"""

import logging
from typing import Any, BinaryIO, Dict, List, Optional

from ...domain.exceptions import NotFoundError, ValidationError, VideoChatError
from ...domain.models.chat import AnalysisResult, ChatMessage, ChatTurnResult, Sender
from ...domain.models.generation import AnalysisProtocol, GenerationConfig
from ...domain.models.media import MediaAsset
from ...domain.models.session_state import LifecycleState
from ...domain.repositories.media_store import MediaStore
from ...domain.services.chat_history import reduce_chat_history
from ...utils.datetime_utils import to_iso, utc_now
from .prompts import ANALYSIS_PROMPT
from .video_analyzer import VideoAnalyzer

logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_MESSAGE = "Video uploaded successfully!"


class AnalysisLifecycle:
    """
    One chat session about one video at a time.

    No locking: overlapping analyze/chat calls on the same session race and
    the last write wins.
    """

    def __init__(
        self,
        session_id: str,
        media_store: MediaStore,
        analyzer: VideoAnalyzer,
        protocol: AnalysisProtocol = AnalysisProtocol.INLINE,
        generation_config: Optional[GenerationConfig] = None,
        model: Optional[str] = None,
    ) -> None:
        self.session_id = session_id
        self.media_store = media_store
        self.analyzer = analyzer
        self.protocol = protocol
        self.generation_config = generation_config
        self.model = model
        self.created_at = utc_now()

        self.state = LifecycleState.EMPTY
        self.asset: Optional[MediaAsset] = None
        self.analysis: Optional[AnalysisResult] = None
        self.messages: List[ChatMessage] = []
        self.last_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def upload(self, stream: BinaryIO, mime_type: str, original_name: str) -> MediaAsset:
        """Store a new video, discarding everything about the previous one."""
        previous = self.asset
        self._reset()

        try:
            asset = self.media_store.store_stream(stream, mime_type, original_name)
        except VideoChatError as e:
            self.last_error = e.message
            raise
        finally:
            self._discard(previous)

        self.asset = asset
        self.state = LifecycleState.UPLOADED
        self.messages.append(ChatMessage(text=UPLOAD_SUCCESS_MESSAGE, sender=Sender.SYSTEM.value))
        logger.info("Session %s: video uploaded %s", self.session_id, asset.local_id)
        return asset

    def analyze(self, prompt: Optional[str] = None) -> AnalysisResult:
        """Run the initial analysis of the current video (default prompt when none given)."""
        asset = self._require_asset()
        prompt = prompt.strip() if prompt and prompt.strip() else ANALYSIS_PROMPT

        try:
            result = self.analyzer.analyze(
                asset,
                prompt,
                protocol=self.protocol,
                generation_config=self.generation_config,
                model=self.model,
            )
        except VideoChatError as e:
            self.last_error = e.message
            raise

        if self.asset is not asset:
            # A newer upload replaced the video while the provider was working
            return result

        self.analysis = result
        self.messages.append(ChatMessage(text=result.text, sender=Sender.AI.value))
        self.state = LifecycleState.ANALYZED
        self.last_error = None
        return result

    def chat(self, question: str) -> ChatTurnResult:
        """Ask a question about the current video using the recent conversation."""
        if not question or not question.strip():
            raise ValidationError("Question is required")
        asset = self._require_asset()

        context = reduce_chat_history(self.messages)
        self.messages.append(ChatMessage(text=question.strip(), sender=Sender.USER.value))

        try:
            reply = self.analyzer.ask(
                asset,
                question.strip(),
                context,
                protocol=self.protocol,
                generation_config=self.generation_config,
                model=self.model,
            )
        except VideoChatError as e:
            self.last_error = e.message
            raise

        if self.asset is not asset:
            return reply

        self.messages.append(ChatMessage(text=reply.text, sender=Sender.AI.value))
        self.state = LifecycleState.CHATTING
        self.last_error = None
        return reply

    def close(self) -> None:
        """Tear the session down and delete the video it owns."""
        previous = self.asset
        self._reset()
        self._discard(previous)

    # ------------------------------------------------------------------
    # Status projection
    # ------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return {
            "id": self.session_id,
            "state": self.state.value,
            "protocol": self.protocol.value,
            "created_at": to_iso(self.created_at),
            "video": _asset_view(self.asset),
            "analysis": _analysis_view(self.analysis),
            "messages": [
                {"text": m.text, "sender": m.sender, "timestamp": to_iso(m.produced_at)}
                for m in self.messages
            ],
            "last_error": self.last_error,
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_asset(self) -> MediaAsset:
        if self.asset is None:
            raise NotFoundError("No video uploaded for this session")
        return self.asset

    def _reset(self) -> None:
        self.state = LifecycleState.EMPTY
        self.asset = None
        self.analysis = None
        self.messages = []
        self.last_error = None

    def _discard(self, asset: Optional[MediaAsset]) -> None:
        if asset is None:
            return
        try:
            self.media_store.delete(asset.local_id)
        except VideoChatError as e:
            logger.warning("Session %s: could not delete %s: %s", self.session_id, asset.local_id, e)


def _asset_view(asset: Optional[MediaAsset]) -> Optional[Dict[str, Any]]:
    if asset is None:
        return None
    return {
        "filename": asset.local_id,
        "path": asset.storage_path,
        "size": asset.byte_size,
        "mimetype": asset.mime_type,
    }


def _analysis_view(analysis: Optional[AnalysisResult]) -> Optional[Dict[str, Any]]:
    if analysis is None:
        return None
    return {
        "text": analysis.text,
        "videoUri": analysis.source_uri,
        "timestamp": to_iso(analysis.produced_at),
        "type": analysis.kind,
    }
