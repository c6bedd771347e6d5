from .chat import AnalysisResult, ChatMessage, ChatTurnResult, HistoryEntry, Sender
from .generation import (
    AI_GENERATION_CONFIG,
    VIDEO_GENERATION_CONFIG,
    AnalysisProtocol,
    GenerationConfig,
)
from .media import (
    InlineMedia,
    MediaAsset,
    MediaReference,
    ProcessingState,
    RemoteFileHandle,
    RemoteMedia,
)
from .session_state import ChatSession, LifecycleState

__all__ = [
    "AI_GENERATION_CONFIG",
    "VIDEO_GENERATION_CONFIG",
    "AnalysisProtocol",
    "AnalysisResult",
    "ChatMessage",
    "ChatSession",
    "ChatTurnResult",
    "GenerationConfig",
    "HistoryEntry",
    "InlineMedia",
    "LifecycleState",
    "MediaAsset",
    "MediaReference",
    "ProcessingState",
    "RemoteFileHandle",
    "RemoteMedia",
    "Sender",
]
