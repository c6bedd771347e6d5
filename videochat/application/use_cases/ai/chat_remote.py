# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import ValidationError
from ....domain.models.generation import AI_GENERATION_CONFIG, AnalysisProtocol
from ....domain.services.chat_history import reduce_chat_history
from ....utils.datetime_utils import to_iso
from ...dto.ai_dto import AiChatPayload, AiChatRequest, AiChatResponse
from ...services.prompts import guided_chat_prompt
from ...services.video_analyzer import VideoAnalyzer

logger = logging.getLogger(__name__)


class ChatWithVideoRemoteUseCase:
    """Use case for answering questions about a video held by the provider"""
    
    def __init__(self, analyzer: VideoAnalyzer, model: Optional[str] = None) -> None:
        self.analyzer = analyzer
        self.model = model
    
    async def execute(self, request: AiChatRequest) -> AiChatResponse:
        """
        Generate a chat response referencing the provider file by URI
        
        Args:
            request: question, provider videoUri and the client chat log
            
        Returns:
            AiChatResponse with the answer text
        """
        if not request.video_uri:
            raise ValidationError("Video URI is required")
        if not request.question:
            raise ValidationError("Question is required")
        
        # Log partial URI only
        logger.info(
            "Generating response for question=%r videoUri=%s...",
            request.question,
            request.video_uri[:50],
        )
        history = reduce_chat_history(item.model_dump() for item in request.chat_history)
        
        reply = await asyncio.to_thread(
            self.analyzer.ask,
            request.video_uri,
            request.question,
            history,
            AnalysisProtocol.REMOTE,
            AI_GENERATION_CONFIG,
            self.model,
            guided_chat_prompt,
        )
        
        return AiChatResponse(
            response=AiChatPayload(
                text=reply.text,
                timestamp=to_iso(reply.produced_at),
                type=reply.kind,
            )
        )
