# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import ValidationError
from ....domain.models.generation import AnalysisProtocol, VIDEO_GENERATION_CONFIG
from ....domain.repositories.media_store import MediaStore
from ....domain.services.chat_history import reduce_chat_history
from ....utils.datetime_utils import to_iso
from ...dto.video_dto import ChatPayload, VideoChatRequest, VideoChatResponse
from ...services.video_analyzer import VideoAnalyzer

logger = logging.getLogger(__name__)


class ChatWithVideoUseCase:
    """Use case for answering a question about a video (step 3 of the flow)"""
    
    def __init__(
        self,
        media_store: MediaStore,
        analyzer: VideoAnalyzer,
        model: Optional[str] = None,
    ) -> None:
        self.media_store = media_store
        self.analyzer = analyzer
        self.model = model
    
    async def execute(self, request: VideoChatRequest) -> VideoChatResponse:
        """
        Answer a chat question
        
        A stored filename is sent inline; a bare videoUri is referenced as a
        provider file. Only the last few non-system messages go along.
        
        Args:
            request: filename or videoUri, the question and the client chat log
            
        Returns:
            VideoChatResponse with the answer text
        """
        if not request.question or not (request.filename or request.video_uri):
            raise ValidationError("Video filename and question are required")
        
        history = reduce_chat_history(item.model_dump() for item in request.chat_history)
        
        if request.filename:
            source = await asyncio.to_thread(self.media_store.get, request.filename)
            logger.info("Processing chat for %s", source.local_id)
        else:
            source = request.video_uri
            logger.info("Processing chat for remote file %s...", source[:50])
        
        reply = await asyncio.to_thread(
            self.analyzer.ask,
            source,
            request.question,
            history,
            AnalysisProtocol.INLINE,
            VIDEO_GENERATION_CONFIG,
            self.model,
        )
        
        return VideoChatResponse(
            response=ChatPayload(text=reply.text, timestamp=to_iso(reply.produced_at))
        )
