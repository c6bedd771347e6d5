from .common_dto import ChatHistoryItem, ErrorResponse
from .video_dto import (
    AnalysisPayload,
    AnalyzeVideoRequest,
    AnalyzeVideoResponse,
    ChatPayload,
    DeleteVideoResponse,
    UploadedFile,
    UploadVideoResponse,
    VideoChatRequest,
    VideoChatResponse,
)
from .ai_dto import (
    AiAnalysisPayload,
    AiAnalyzeRequest,
    AiAnalyzeResponse,
    AiChatPayload,
    AiChatRequest,
    AiChatResponse,
)
from .session_dto import (
    SessionAnalyzeRequest,
    SessionChatRequest,
    SessionMessage,
    SessionResponse,
    SessionView,
)

__all__ = [
    "AiAnalysisPayload",
    "AiAnalyzeRequest",
    "AiAnalyzeResponse",
    "AiChatPayload",
    "AiChatRequest",
    "AiChatResponse",
    "AnalysisPayload",
    "AnalyzeVideoRequest",
    "AnalyzeVideoResponse",
    "ChatHistoryItem",
    "ChatPayload",
    "DeleteVideoResponse",
    "ErrorResponse",
    "SessionAnalyzeRequest",
    "SessionChatRequest",
    "SessionMessage",
    "SessionResponse",
    "SessionView",
    "UploadedFile",
    "UploadVideoResponse",
    "VideoChatRequest",
    "VideoChatResponse",
]
