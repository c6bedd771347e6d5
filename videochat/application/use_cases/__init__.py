from .video import (
    AnalyzeVideoUseCase,
    ChatWithVideoUseCase,
    DeleteVideoUseCase,
    UploadVideoUseCase,
)
from .ai import AnalyzeVideoRemoteUseCase, ChatWithVideoRemoteUseCase
from .session import SessionLifecycleUseCase

__all__ = [
    "AnalyzeVideoUseCase",
    "ChatWithVideoUseCase",
    "DeleteVideoUseCase",
    "UploadVideoUseCase",
    "AnalyzeVideoRemoteUseCase",
    "ChatWithVideoRemoteUseCase",
    "SessionLifecycleUseCase",
]
