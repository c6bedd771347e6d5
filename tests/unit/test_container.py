"""
Unit tests for the DI container wiring
"""
import pytest

from videochat.application.services import VideoAnalyzer
from videochat.application.use_cases.session import SessionLifecycleUseCase
from videochat.application.use_cases.video import AnalyzeVideoUseCase
from videochat.di import BaseContainer, get_container
from videochat.domain.gateways.provider_gateway import ProviderGateway
from videochat.domain.models.generation import AI_GENERATION_CONFIG, AnalysisProtocol
from videochat.domain.repositories.media_store import MediaStore
from videochat.infrastructure.external import UnavailableGateway


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_missing_key(self):
        with pytest.raises(ValueError, match="No registration found for MediaStore"):
            BaseContainer().get(MediaStore)

    def test_singleton_and_factory(self):
        container = BaseContainer()
        container.register_singleton("a", object())
        container.register_factory("b", object)
        assert container.get("a") is container.get("a")
        assert container.get("b") is not container.get("b")

    def test_singleton_replaces_factory(self):
        container = BaseContainer()
        container.register_factory("k", lambda: 1)
        container.register_singleton("k", 2)
        assert container.get("k") == 2


class TestDIContainer:
    """Tests for the application container"""

    def test_wiring_without_api_key(self, mock_env):
        container = get_container()
        assert container is get_container()
        assert isinstance(container.get(ProviderGateway), UnavailableGateway)
        assert container.get(MediaStore).root.name == "uploads"
        assert isinstance(container.get(AnalyzeVideoUseCase), AnalyzeVideoUseCase)

    def test_overridden_gateway_reaches_analyzer(self, mock_env, mock_gateway):
        container = get_container()
        container.register_singleton(ProviderGateway, mock_gateway)
        assert container.get(VideoAnalyzer).gateway is mock_gateway

    def test_remote_session_protocol(self, mock_env, monkeypatch):
        monkeypatch.setenv("SESSION_ANALYSIS_PROTOCOL", "remote")
        use_case = get_container().get(SessionLifecycleUseCase)
        assert use_case.protocol == AnalysisProtocol.REMOTE
        assert use_case.generation_config == AI_GENERATION_CONFIG
        assert use_case.model == "gemini-2.5-pro"

    def test_unknown_session_protocol_falls_back_to_inline(self, mock_env, monkeypatch):
        monkeypatch.setenv("SESSION_ANALYSIS_PROTOCOL", "carrier-pigeon")
        use_case = get_container().get(SessionLifecycleUseCase)
        assert use_case.protocol == AnalysisProtocol.INLINE
