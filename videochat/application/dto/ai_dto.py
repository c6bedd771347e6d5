"""DTOs for the /api/ai endpoints (remote file protocol)."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from .common_dto import ChatHistoryItem


class AiAnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_path: Optional[str] = Field(default=None, alias="videoPath")


class AiAnalysisPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    video_uri: Optional[str] = Field(default=None, alias="videoUri")
    timestamp: str
    type: str = "initial-analysis"


class AiAnalyzeResponse(BaseModel):
    success: bool = True
    analysis: AiAnalysisPayload


class AiChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = None
    video_uri: Optional[str] = Field(default=None, alias="videoUri")
    chat_history: List[ChatHistoryItem] = Field(default_factory=list, alias="chatHistory")


class AiChatPayload(BaseModel):
    text: str
    timestamp: str
    type: str = "chat-response"


class AiChatResponse(BaseModel):
    success: bool = True
    response: AiChatPayload
