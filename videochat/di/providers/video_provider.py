from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.media_store import MediaStore
from ...application.services.video_analyzer import VideoAnalyzer
from ...application.use_cases.video import (
    AnalyzeVideoUseCase,
    ChatWithVideoUseCase,
    DeleteVideoUseCase,
    UploadVideoUseCase,
)
from ...application.use_cases.ai import (
    AnalyzeVideoRemoteUseCase,
    ChatWithVideoRemoteUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VideoProvider:
    """Video use case provider - registers /api/video and /api/ai use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register video use cases.
        Use cases are created on-demand via factories.
        """
        settings = get_settings()
        
        container.register_factory(
            UploadVideoUseCase,
            lambda: UploadVideoUseCase(media_store=container.get(MediaStore))
        )
        
        container.register_factory(
            AnalyzeVideoUseCase,
            lambda: AnalyzeVideoUseCase(
                media_store=container.get(MediaStore),
                analyzer=container.get(VideoAnalyzer),
                model=settings.video_model,
            )
        )
        
        container.register_factory(
            ChatWithVideoUseCase,
            lambda: ChatWithVideoUseCase(
                media_store=container.get(MediaStore),
                analyzer=container.get(VideoAnalyzer),
                model=settings.video_model,
            )
        )
        
        container.register_factory(
            DeleteVideoUseCase,
            lambda: DeleteVideoUseCase(media_store=container.get(MediaStore))
        )
        
        container.register_factory(
            AnalyzeVideoRemoteUseCase,
            lambda: AnalyzeVideoRemoteUseCase(
                media_store=container.get(MediaStore),
                analyzer=container.get(VideoAnalyzer),
                model=settings.ai_model,
            )
        )
        
        container.register_factory(
            ChatWithVideoRemoteUseCase,
            lambda: ChatWithVideoRemoteUseCase(
                analyzer=container.get(VideoAnalyzer),
                model=settings.ai_model,
            )
        )
