# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import ValidationError
from ....domain.models.generation import AI_GENERATION_CONFIG, AnalysisProtocol
from ....domain.repositories.media_store import MediaStore
from ....utils.datetime_utils import to_iso
from ...dto.ai_dto import AiAnalysisPayload, AiAnalyzeRequest, AiAnalyzeResponse
from ...services.prompts import ANALYSIS_PROMPT
from ...services.video_analyzer import VideoAnalyzer

logger = logging.getLogger(__name__)


class AnalyzeVideoRemoteUseCase:
    """Use case for the structured initial analysis through the Gemini Files API"""
    
    def __init__(
        self,
        media_store: MediaStore,
        analyzer: VideoAnalyzer,
        model: Optional[str] = None,
    ) -> None:
        self.media_store = media_store
        self.analyzer = analyzer
        self.model = model
    
    async def execute(self, request: AiAnalyzeRequest) -> AiAnalyzeResponse:
        """
        Upload the stored video to Gemini, wait until it is processed, analyze it
        
        Args:
            request: videoPath as returned by the upload endpoint (or bare filename)
            
        Returns:
            AiAnalyzeResponse with the analysis text and the provider file URI
        """
        if not request.video_path:
            raise ValidationError("Video path is required")
        
        logger.info("Starting video analysis for: %s", request.video_path)
        asset = await asyncio.to_thread(self.media_store.locate, request.video_path)
        logger.info(
            "File details: size=%d mimeType=%s path=%s",
            asset.byte_size,
            asset.mime_type,
            asset.storage_path,
        )
        
        result = await asyncio.to_thread(
            self.analyzer.analyze,
            asset,
            ANALYSIS_PROMPT,
            AnalysisProtocol.REMOTE,
            AI_GENERATION_CONFIG,
            self.model,
        )
        
        return AiAnalyzeResponse(
            analysis=AiAnalysisPayload(
                text=result.text,
                video_uri=result.source_uri,
                timestamp=to_iso(result.produced_at),
                type=result.kind,
            )
        )
