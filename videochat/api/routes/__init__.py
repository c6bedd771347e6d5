from .video_controller import router as video_router
from .ai_controller import router as ai_router
from .session_controller import router as session_router
from .events_controller import router as events_router


__all__ = ["video_router", "ai_router", "session_router", "events_router"]
