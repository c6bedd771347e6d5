"""DTOs for the /api/video endpoints (inline video protocol)."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from .common_dto import ChatHistoryItem


class UploadedFile(BaseModel):
    """Descriptor of a stored upload"""
    filename: str
    path: str
    size: int
    mimetype: str


class UploadVideoResponse(BaseModel):
    success: bool = True
    file: UploadedFile


class AnalyzeVideoRequest(BaseModel):
    filename: Optional[str] = None
    prompt: Optional[str] = None


class AnalysisPayload(BaseModel):
    text: str
    timestamp: str


class AnalyzeVideoResponse(BaseModel):
    success: bool = True
    analysis: AnalysisPayload


class VideoChatRequest(BaseModel):
    """Either filename (stored upload) or videoUri (provider file) must be set"""
    model_config = ConfigDict(populate_by_name=True)

    filename: Optional[str] = None
    video_uri: Optional[str] = Field(default=None, alias="videoUri")
    question: Optional[str] = None
    chat_history: List[ChatHistoryItem] = Field(default_factory=list, alias="chatHistory")


class ChatPayload(BaseModel):
    text: str
    timestamp: str


class VideoChatResponse(BaseModel):
    success: bool = True
    response: ChatPayload


class DeleteVideoResponse(BaseModel):
    success: bool = True
    filename: str
