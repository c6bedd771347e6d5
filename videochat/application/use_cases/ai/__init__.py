from .analyze_remote import AnalyzeVideoRemoteUseCase
from .chat_remote import ChatWithVideoRemoteUseCase

__all__ = [
    "AnalyzeVideoRemoteUseCase",
    "ChatWithVideoRemoteUseCase",
]
