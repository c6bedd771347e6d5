from .upload_video import UploadVideoUseCase
from .analyze_video import AnalyzeVideoUseCase
from .chat_with_video import ChatWithVideoUseCase
from .delete_video import DeleteVideoUseCase

__all__ = [
    "UploadVideoUseCase",
    "AnalyzeVideoUseCase",
    "ChatWithVideoUseCase",
    "DeleteVideoUseCase",
]
