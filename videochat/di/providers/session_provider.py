import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.models.generation import (
    AI_GENERATION_CONFIG,
    VIDEO_GENERATION_CONFIG,
    AnalysisProtocol,
)
from ...domain.repositories.media_store import MediaStore
from ...domain.repositories.session_repository import SessionRepository
from ...application.services.video_analyzer import VideoAnalyzer
from ...application.use_cases.session import SessionLifecycleUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class SessionProvider:
    """Session use case provider - picks the analysis protocol for sessions"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        try:
            protocol = AnalysisProtocol(settings.session_analysis_protocol)
        except ValueError:
            logger.warning(
                "Unknown SESSION_ANALYSIS_PROTOCOL %r, using inline",
                settings.session_analysis_protocol,
            )
            protocol = AnalysisProtocol.INLINE
        
        if protocol == AnalysisProtocol.REMOTE:
            generation_config, model = AI_GENERATION_CONFIG, settings.ai_model
        else:
            generation_config, model = VIDEO_GENERATION_CONFIG, settings.video_model
        
        container.register_factory(
            SessionLifecycleUseCase,
            lambda: SessionLifecycleUseCase(
                session_repository=container.get(SessionRepository),
                media_store=container.get(MediaStore),
                analyzer=container.get(VideoAnalyzer),
                protocol=protocol,
                generation_config=generation_config,
                model=model,
            )
        )
