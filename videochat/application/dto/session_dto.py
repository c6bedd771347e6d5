"""DTOs for the session lifecycle API."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class SessionAnalyzeRequest(BaseModel):
    prompt: Optional[str] = None  # default analysis prompt when omitted


class SessionChatRequest(BaseModel):
    question: Optional[str] = None


class SessionMessage(BaseModel):
    text: str
    sender: str
    timestamp: str


class SessionView(BaseModel):
    """Status projection of one session"""
    id: str
    state: str  # "empty" | "uploaded" | "analyzed" | "chatting"
    protocol: str
    created_at: str
    video: Optional[Dict[str, Any]] = None
    analysis: Optional[Dict[str, Any]] = None
    messages: List[SessionMessage] = Field(default_factory=list)
    last_error: Optional[str] = None


class SessionResponse(BaseModel):
    success: bool = True
    session: SessionView
    reply: Optional[Dict[str, Any]] = None  # set by analyze/chat
