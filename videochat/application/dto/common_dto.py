from pydantic import BaseModel
from typing import Optional


class ChatHistoryItem(BaseModel):
    """One entry of the client's chat log"""
    text: str = ""
    sender: str = ""  # "user" | "ai" | "system"
    timestamp: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned for every failed request"""
    success: bool = False
    error: str
