"""
Unit tests for VideoAnalyzer (both analysis protocols)
"""

import pytest

from videochat.application.services import VideoAnalyzer
from videochat.application.services.prompts import guided_chat_prompt
from videochat.domain.exceptions import ProcessingTimeoutError, ProviderError
from videochat.domain.models.chat import HistoryEntry
from videochat.domain.models.generation import AnalysisProtocol, VIDEO_GENERATION_CONFIG
from videochat.domain.models.media import InlineMedia, RemoteMedia

REMOTE_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc123"


@pytest.fixture
def analyzer(mock_gateway, media_store):
    return VideoAnalyzer(gateway=mock_gateway, media_store=media_store)


@pytest.fixture
def asset(media_store):
    return media_store.store(b"video-bytes", "video/webm", "clip.webm")


class TestInlineProtocol:
    """Protocol A: bytes inline"""

    def test_analyze_sends_bytes(self, analyzer, asset, mock_gateway):
        result = analyzer.analyze(asset, "Describe this", generation_config=VIDEO_GENERATION_CONFIG)

        assert result.text == "A cat runs."
        assert result.source_uri is None
        assert result.kind == "initial-analysis"
        mock_gateway.generate_content.assert_called_once_with(
            InlineMedia(data=b"video-bytes", mime_type="video/webm"),
            "Describe this",
            (),
            VIDEO_GENERATION_CONFIG,
            None,
        )
        mock_gateway.upload_file.assert_not_called()

    def test_ask_passes_history_and_direct_prompt(self, analyzer, asset, mock_gateway):
        history = [HistoryEntry(role="user", content="hi")]
        reply = analyzer.ask(asset, "What color is the cat?", history)

        assert reply.kind == "chat-response"
        args = mock_gateway.generate_content.call_args.args
        assert args[1].startswith("What color is the cat?\n\nBased on the video content")
        assert args[2] == history

    def test_ask_by_uri_references_remote_file(self, analyzer, mock_gateway):
        analyzer.ask(REMOTE_URI, "Q", protocol=AnalysisProtocol.REMOTE, prompt_builder=guided_chat_prompt)

        media = mock_gateway.generate_content.call_args.args[0]
        assert media == RemoteMedia(uri=REMOTE_URI, mime_type="video/mp4")
        mock_gateway.upload_file.assert_not_called()


class TestRemoteProtocol:
    """Protocol B: upload, wait until ACTIVE, generate by URI, delete"""

    def test_analyze_round_trip(self, analyzer, asset, mock_gateway):
        result = analyzer.analyze(asset, "Analyze", protocol=AnalysisProtocol.REMOTE)

        assert result.text == "A cat runs."
        assert result.source_uri == REMOTE_URI
        mock_gateway.upload_file.assert_called_once_with(b"video-bytes", "video/webm", asset.local_id)
        mock_gateway.wait_until_active.assert_called_once_with(mock_gateway.upload_file.return_value)
        media = mock_gateway.generate_content.call_args.args[0]
        assert media == RemoteMedia(uri=REMOTE_URI, mime_type="video/mp4")
        mock_gateway.delete_file.assert_called_once_with(mock_gateway.upload_file.return_value)

    def test_cleanup_failure_is_only_logged(self, analyzer, asset, mock_gateway):
        mock_gateway.delete_file.side_effect = ProviderError("delete failed")
        result = analyzer.analyze(asset, "Analyze", protocol=AnalysisProtocol.REMOTE)
        assert result.text == "A cat runs."

    def test_processing_timeout_propagates(self, analyzer, asset, mock_gateway):
        mock_gateway.wait_until_active.side_effect = ProcessingTimeoutError("files/abc123", "PROCESSING", 30)
        with pytest.raises(ProcessingTimeoutError):
            analyzer.analyze(asset, "Analyze", protocol=AnalysisProtocol.REMOTE)
        mock_gateway.generate_content.assert_not_called()
        mock_gateway.delete_file.assert_called_once_with(mock_gateway.upload_file.return_value)

    def test_generation_failure_still_deletes_remote_file(self, analyzer, asset, mock_gateway):
        mock_gateway.generate_content.side_effect = ProviderError("Gemini API Error: quota")
        with pytest.raises(ProviderError, match="quota"):
            analyzer.analyze(asset, "Analyze", protocol=AnalysisProtocol.REMOTE)
        mock_gateway.delete_file.assert_called_once_with(mock_gateway.upload_file.return_value)

    def test_upload_failure_deletes_nothing(self, analyzer, asset, mock_gateway):
        mock_gateway.upload_file.side_effect = ProviderError("Failed to get upload response from Gemini")
        with pytest.raises(ProviderError):
            analyzer.analyze(asset, "Analyze", protocol=AnalysisProtocol.REMOTE)
        mock_gateway.delete_file.assert_not_called()

    def test_call_order(self, analyzer, asset, mock_gateway):
        analyzer.ask(asset, "Q", protocol=AnalysisProtocol.REMOTE)
        names = [c[0] for c in mock_gateway.mock_calls]
        assert names == ["upload_file", "wait_until_active", "generate_content", "delete_file"]
