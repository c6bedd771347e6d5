"""Server-side chat sessions: upload → analyze → chat on one video."""

# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, File, UploadFile, status

# Local application imports
from ...application.dto.session_dto import (
    SessionAnalyzeRequest,
    SessionChatRequest,
    SessionResponse,
)
from ...application.use_cases.session import SessionLifecycleUseCase
from ...domain.constants import UPLOAD_FIELD_NAME
from ...di.container import get_container


router = APIRouter(tags=["sessions"])


def _use_case() -> SessionLifecycleUseCase:
    return get_container().get(SessionLifecycleUseCase)


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session() -> SessionResponse:
    """Open a new, empty session"""
    return await _use_case().create()


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Current state, video, analysis and message log of a session"""
    return await _use_case().get(session_id)


@router.post("/{session_id}/upload", response_model=SessionResponse)
async def upload_session_video(
    session_id: str,
    file: Optional[UploadFile] = File(None, alias=UPLOAD_FIELD_NAME),
) -> SessionResponse:
    """
    Replace the session's video; history and analysis are reset
    
    Args:
        session_id: Session identifier
        file: Multipart field "video"
    """
    use_case = _use_case()
    if file is None:
        return await use_case.upload(session_id, stream=None, mime_type=None, filename=None)
    
    try:
        return await use_case.upload(
            session_id,
            stream=file.file,
            mime_type=file.content_type,
            filename=file.filename,
        )
    finally:
        await file.close()


@router.post("/{session_id}/analyze", response_model=SessionResponse)
async def analyze_session_video(
    session_id: str,
    request: Optional[SessionAnalyzeRequest] = None,
) -> SessionResponse:
    """Analyze the session's video; the default analysis prompt is used when none is given"""
    prompt = request.prompt if request else None
    return await _use_case().analyze(session_id, prompt)


@router.post("/{session_id}/chat", response_model=SessionResponse)
async def chat_in_session(session_id: str, request: SessionChatRequest) -> SessionResponse:
    """Ask a question; the last five non-system messages go along as context"""
    return await _use_case().chat(session_id, request.question)


@router.delete("/{session_id}", response_model=SessionResponse)
async def close_session(session_id: str) -> SessionResponse:
    """Tear the session down and delete its video"""
    return await _use_case().close(session_id)
