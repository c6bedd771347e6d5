# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, File, UploadFile

# Local application imports
from ...application.dto.video_dto import (
    AnalyzeVideoRequest,
    AnalyzeVideoResponse,
    DeleteVideoResponse,
    UploadVideoResponse,
    VideoChatRequest,
    VideoChatResponse,
)
from ...application.use_cases.video import (
    AnalyzeVideoUseCase,
    ChatWithVideoUseCase,
    DeleteVideoUseCase,
    UploadVideoUseCase,
)
from ...domain.constants import UPLOAD_FIELD_NAME
from ...di.container import get_container


router = APIRouter(tags=["video"])


@router.post("/upload", response_model=UploadVideoResponse)
async def upload_video(
    file: Optional[UploadFile] = File(None, alias=UPLOAD_FIELD_NAME),
) -> UploadVideoResponse:
    """
    Upload a video (multipart field "video")
    
    Args:
        file: MP4, WebM or MOV file, at most UPLOAD_MAX_MB
        
    Returns:
        UploadVideoResponse with the generated filename and absolute path
    """
    container = get_container()
    upload_video_use_case = container.get(UploadVideoUseCase)
    
    if file is None:
        return await upload_video_use_case.execute(stream=None, mime_type=None, filename=None)
    
    try:
        return await upload_video_use_case.execute(
            stream=file.file,
            mime_type=file.content_type,
            filename=file.filename,
        )
    finally:
        await file.close()


@router.post("/analyze", response_model=AnalyzeVideoResponse)
async def analyze_video(request: AnalyzeVideoRequest) -> AnalyzeVideoResponse:
    """
    Analyze an uploaded video with a free-form prompt (video sent inline)
    
    Args:
        request: filename from upload plus the prompt
        
    Returns:
        AnalyzeVideoResponse with the analysis text
    """
    container = get_container()
    analyze_video_use_case = container.get(AnalyzeVideoUseCase)
    return await analyze_video_use_case.execute(request)


@router.post("/chat", response_model=VideoChatResponse)
async def chat_with_video(request: VideoChatRequest) -> VideoChatResponse:
    """
    Ask a question about a video, with the recent chat history as context
    
    Args:
        request: filename or videoUri, question and chatHistory
        
    Returns:
        VideoChatResponse with the answer text
    """
    container = get_container()
    chat_use_case = container.get(ChatWithVideoUseCase)
    return await chat_use_case.execute(request)


@router.delete("/{filename}", response_model=DeleteVideoResponse)
async def delete_video(filename: str) -> DeleteVideoResponse:
    """Delete a stored upload"""
    container = get_container()
    delete_video_use_case = container.get(DeleteVideoUseCase)
    return await delete_video_use_case.execute(filename)
