"""
Fixtures for API tests: real app and container, provider gateway stubbed.
"""
import pytest
from fastapi.testclient import TestClient

from videochat.di.container import get_container
from videochat.domain.gateways.provider_gateway import ProviderGateway


def _make_client(**kwargs):
    from videochat.main import create_application

    return TestClient(create_application(), **kwargs)


@pytest.fixture
def client(mock_env, mock_gateway):
    """Create test client whose container uses the stub gateway."""
    get_container().register_singleton(ProviderGateway, mock_gateway)
    with _make_client() as c:
        yield c


@pytest.fixture
def lenient_client(mock_env, mock_gateway):
    """Like client, but unexpected server errors come back as 500 responses."""
    get_container().register_singleton(ProviderGateway, mock_gateway)
    with _make_client(raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def unconfigured_client(mock_env):
    """Client with no API key: the real (disabled) gateway stays registered."""
    with _make_client() as c:
        yield c


@pytest.fixture
def uploaded(client):
    """Upload a small mp4 and return the stored file descriptor."""
    response = client.post(
        "/api/video/upload",
        files={"video": ("clip.mp4", b"\x00\x00\x00\x18ftypmp42" * 64, "video/mp4")},
    )
    assert response.status_code == 200
    return response.json()["file"]
