"""
Shared pytest fixtures for videochat tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from videochat.core.config import reset_settings
from videochat.di.container import reset_container
from videochat.domain.gateways.provider_gateway import ProviderGateway
from videochat.domain.models.media import ProcessingState, RemoteFileHandle
from videochat.infrastructure.storage import LocalMediaStore

REMOTE_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc123"


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set test environment variables (no API key, temp upload dir)."""
    env_vars = {
        "GEMINI_API_KEY": "",
        "GOOGLE_AI_KEY": "",
        "GOOGLE_API_KEY": "",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "CLIENT_URL": "http://localhost:5173",
        "SESSION_ANALYSIS_PROTOCOL": "inline",
        "LOG_LEVEL": "INFO",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        reset_container()
        yield env_vars
    reset_settings()
    reset_container()


@pytest.fixture
def media_store(tmp_path):
    """Store writing into a temp directory with a 1 MiB ceiling."""
    return LocalMediaStore(root=tmp_path / "store", max_bytes=1024 * 1024)


@pytest.fixture
def mock_gateway():
    """
    ProviderGateway stub: generate_content answers "A cat runs.", remote
    uploads become ACTIVE on the first wait.
    """
    gateway = MagicMock(spec=ProviderGateway)
    gateway.generate_content.return_value = "A cat runs."
    gateway.upload_file.return_value = RemoteFileHandle(
        uri=REMOTE_URI,
        name="files/abc123",
        state=ProcessingState.PROCESSING,
        mime_type="video/mp4",
    )
    gateway.wait_until_active.return_value = RemoteFileHandle(
        uri=REMOTE_URI,
        name="files/abc123",
        state=ProcessingState.ACTIVE,
        mime_type="video/mp4",
    )
    return gateway
