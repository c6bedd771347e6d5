"""
Unit tests for the /api/video and /api/ai use cases (analyzer and store mocked)
"""
from unittest.mock import MagicMock

import pytest

from videochat.application.dto import (
    AiAnalyzeRequest,
    AiChatRequest,
    AnalyzeVideoRequest,
    VideoChatRequest,
)
from videochat.application.use_cases.ai import AnalyzeVideoRemoteUseCase, ChatWithVideoRemoteUseCase
from videochat.application.use_cases.video import (
    AnalyzeVideoUseCase,
    ChatWithVideoUseCase,
    DeleteVideoUseCase,
    UploadVideoUseCase,
)
from videochat.domain.exceptions import NotFoundError, ValidationError
from videochat.domain.models.chat import AnalysisResult, ChatTurnResult
from videochat.domain.models.generation import (
    AI_GENERATION_CONFIG,
    VIDEO_GENERATION_CONFIG,
    AnalysisProtocol,
)
from videochat.domain.models.media import MediaAsset


def _asset(local_id="1700000000000-42.mp4"):
    return MediaAsset(
        local_id=local_id,
        storage_path=f"/srv/uploads/{local_id}",
        byte_size=2048,
        mime_type="video/mp4",
    )


@pytest.fixture
def store():
    store = MagicMock()
    store.get.return_value = _asset()
    store.locate.return_value = _asset()
    store.store_stream.return_value = _asset()
    return store


@pytest.fixture
def analyzer():
    analyzer = MagicMock()
    analyzer.analyze.return_value = AnalysisResult(text="A cat runs.", source_uri="https://x/files/1")
    analyzer.ask.return_value = ChatTurnResult(text="Orange.")
    return analyzer


class TestUploadVideoUseCase:
    """Tests for UploadVideoUseCase"""

    @pytest.mark.asyncio
    async def test_no_file(self, store):
        with pytest.raises(ValidationError, match="No video file uploaded"):
            await UploadVideoUseCase(store).execute(None, None, None)

    @pytest.mark.asyncio
    async def test_upload(self, store):
        stream = MagicMock()
        response = await UploadVideoUseCase(store).execute(stream, "video/mp4", "clip.mp4")
        store.store_stream.assert_called_once_with(stream, "video/mp4", "clip.mp4")
        assert response.success is True
        assert response.file.filename == "1700000000000-42.mp4"
        assert response.file.size == 2048


class TestAnalyzeVideoUseCase:
    """Tests for AnalyzeVideoUseCase"""

    @pytest.mark.asyncio
    async def test_missing_fields(self, store, analyzer):
        use_case = AnalyzeVideoUseCase(store, analyzer)
        with pytest.raises(ValidationError, match="filename and prompt are required"):
            await use_case.execute(AnalyzeVideoRequest(filename="x.mp4"))

    @pytest.mark.asyncio
    async def test_inline_analysis(self, store, analyzer):
        use_case = AnalyzeVideoUseCase(store, analyzer, model="gemini-2.5-flash")
        response = await use_case.execute(AnalyzeVideoRequest(filename="x.mp4", prompt="Describe this"))

        assert response.analysis.text == "A cat runs."
        analyzer.analyze.assert_called_once_with(
            _asset(),
            "Describe this",
            AnalysisProtocol.INLINE,
            VIDEO_GENERATION_CONFIG,
            "gemini-2.5-flash",
        )


class TestChatWithVideoUseCase:
    """Tests for ChatWithVideoUseCase"""

    @pytest.mark.asyncio
    async def test_requires_question_and_video(self, store, analyzer):
        use_case = ChatWithVideoUseCase(store, analyzer)
        with pytest.raises(ValidationError):
            await use_case.execute(VideoChatRequest(question="Q"))
        with pytest.raises(ValidationError):
            await use_case.execute(VideoChatRequest(filename="x.mp4"))

    @pytest.mark.asyncio
    async def test_filename_uses_stored_asset(self, store, analyzer):
        use_case = ChatWithVideoUseCase(store, analyzer)
        request = VideoChatRequest.model_validate({
            "filename": "x.mp4",
            "question": "What color?",
            "chatHistory": [
                {"text": "Video uploaded successfully!", "sender": "system"},
                {"text": "What is it?", "sender": "user"},
                {"text": "A cat.", "sender": "ai"},
            ],
        })
        response = await use_case.execute(request)

        assert response.response.text == "Orange."
        args = analyzer.ask.call_args.args
        assert args[0] == _asset()
        assert [e.role for e in args[2]] == ["user", "model"]

    @pytest.mark.asyncio
    async def test_video_uri_alone(self, store, analyzer):
        use_case = ChatWithVideoUseCase(store, analyzer)
        await use_case.execute(VideoChatRequest.model_validate({"videoUri": "https://x/files/1", "question": "Q"}))
        assert analyzer.ask.call_args.args[0] == "https://x/files/1"
        store.get.assert_not_called()


class TestDeleteVideoUseCase:
    """Tests for DeleteVideoUseCase"""

    @pytest.mark.asyncio
    async def test_delete_missing(self, store):
        store.delete.return_value = False
        with pytest.raises(NotFoundError):
            await DeleteVideoUseCase(store).execute("nope.mp4")

    @pytest.mark.asyncio
    async def test_delete(self, store):
        store.delete.return_value = True
        response = await DeleteVideoUseCase(store).execute("x.mp4")
        assert response.filename == "x.mp4"


class TestRemoteUseCases:
    """Tests for the /api/ai use cases"""

    @pytest.mark.asyncio
    async def test_analyze_requires_path(self, store, analyzer):
        with pytest.raises(ValidationError, match="Video path is required"):
            await AnalyzeVideoRemoteUseCase(store, analyzer).execute(AiAnalyzeRequest())

    @pytest.mark.asyncio
    async def test_analyze_remote(self, store, analyzer):
        use_case = AnalyzeVideoRemoteUseCase(store, analyzer, model="gemini-2.5-pro")
        response = await use_case.execute(AiAnalyzeRequest(videoPath="/srv/uploads/1700000000000-42.mp4"))

        store.locate.assert_called_once_with("/srv/uploads/1700000000000-42.mp4")
        args = analyzer.analyze.call_args.args
        assert args[2] == AnalysisProtocol.REMOTE
        assert args[3] == AI_GENERATION_CONFIG
        assert response.analysis.video_uri == "https://x/files/1"
        assert response.analysis.type == "initial-analysis"

    @pytest.mark.asyncio
    async def test_chat_validation_order(self, analyzer):
        use_case = ChatWithVideoRemoteUseCase(analyzer)
        with pytest.raises(ValidationError, match="Video URI is required"):
            await use_case.execute(AiChatRequest(question="Q"))
        with pytest.raises(ValidationError, match="Question is required"):
            await use_case.execute(AiChatRequest(videoUri="https://x/files/1"))

    @pytest.mark.asyncio
    async def test_chat_remote(self, analyzer):
        use_case = ChatWithVideoRemoteUseCase(analyzer)
        response = await use_case.execute(AiChatRequest(videoUri="https://x/files/1", question="Q"))
        assert response.response.type == "chat-response"
        assert analyzer.ask.call_args.args[3] == AnalysisProtocol.REMOTE
