# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.exceptions import ValidationError
from ....domain.models.generation import AnalysisProtocol, VIDEO_GENERATION_CONFIG
from ....domain.repositories.media_store import MediaStore
from ....utils.datetime_utils import to_iso
from ...dto.video_dto import AnalysisPayload, AnalyzeVideoRequest, AnalyzeVideoResponse
from ...services.video_analyzer import VideoAnalyzer

logger = logging.getLogger(__name__)


class AnalyzeVideoUseCase:
    """Use case for analyzing a stored video with a user prompt (inline bytes)"""
    
    def __init__(
        self,
        media_store: MediaStore,
        analyzer: VideoAnalyzer,
        model: Optional[str] = None,
    ) -> None:
        self.media_store = media_store
        self.analyzer = analyzer
        self.model = model
    
    async def execute(self, request: AnalyzeVideoRequest) -> AnalyzeVideoResponse:
        """
        Analyze a previously uploaded video
        
        Args:
            request: filename returned by upload and the prompt to run
            
        Returns:
            AnalyzeVideoResponse with the analysis text
        """
        if not request.filename or not request.prompt:
            raise ValidationError("Video filename and prompt are required")
        
        asset = await asyncio.to_thread(self.media_store.get, request.filename)
        logger.info("Analyzing video: %s", asset.local_id)
        logger.debug("Prompt: %s", request.prompt)
        
        result = await asyncio.to_thread(
            self.analyzer.analyze,
            asset,
            request.prompt,
            AnalysisProtocol.INLINE,
            VIDEO_GENERATION_CONFIG,
            self.model,
        )
        
        return AnalyzeVideoResponse(
            analysis=AnalysisPayload(text=result.text, timestamp=to_iso(result.produced_at))
        )
