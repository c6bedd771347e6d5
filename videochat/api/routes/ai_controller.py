# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.ai_dto import AiAnalyzeRequest, AiAnalyzeResponse, AiChatRequest, AiChatResponse
from ...application.use_cases.ai import AnalyzeVideoRemoteUseCase, ChatWithVideoRemoteUseCase
from ...di.container import get_container


router = APIRouter(tags=["ai"])


@router.post("/analyze", response_model=AiAnalyzeResponse)
async def analyze_video(request: AiAnalyzeRequest) -> AiAnalyzeResponse:
    """
    Run the structured initial analysis through the Gemini Files API
    
    The response carries videoUri; follow-up questions go to /api/ai/chat with it.
    
    Args:
        request: videoPath as returned by /api/video/upload
        
    Returns:
        AiAnalyzeResponse (type "initial-analysis")
    """
    container = get_container()
    analyze_use_case = container.get(AnalyzeVideoRemoteUseCase)
    return await analyze_use_case.execute(request)


@router.post("/chat", response_model=AiChatResponse)
async def chat_with_video(request: AiChatRequest) -> AiChatResponse:
    """
    Ask a question about a video already held by the provider
    
    Args:
        request: question, videoUri and chatHistory
        
    Returns:
        AiChatResponse (type "chat-response")
    """
    container = get_container()
    chat_use_case = container.get(ChatWithVideoRemoteUseCase)
    return await chat_use_case.execute(request)
