"""
Virtual SA service test configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from virtual_sa.config import Settings
from virtual_sa.dependencies import get_discovery_service, get_nvidia_client, get_settings
from virtual_sa.main import app
from virtual_sa.models.schemas import ArchitectureResponse
from virtual_sa.services.catalog import ScenarioCatalog, load_catalog
from virtual_sa.services.discovery_service import DiscoveryService
from virtual_sa.services.llm_client import NvidiaClient

from fixtures.discovery_test_data import SAMPLE_ARCHITECTURE, UpstreamStub


@pytest.fixture
def test_settings():
    """Test settings configuration."""
    return Settings(
        NVIDIA_API_KEY="test-key",
        NVIDIA_API_BASE_URL="https://nim.test",
        NVIDIA_API_TIMEOUT=5.0,
        DEBUG=True,
    )


@pytest.fixture
def keyless_settings():
    """Settings with no NVIDIA credential."""
    return Settings(NVIDIA_API_KEY=None, NVIDIA_API_BASE_URL="https://nim.test", DEBUG=True)


@pytest.fixture
def upstream():
    """Recording stub for the NVIDIA API; tests adjust its reply."""
    return UpstreamStub()


@pytest.fixture
def nvidia_client(test_settings, upstream):
    return NvidiaClient(test_settings, transport=upstream.transport())


@pytest.fixture
def discovery_service(nvidia_client, test_settings):
    return DiscoveryService(nvidia_client, test_settings)


@pytest.fixture
def catalog() -> ScenarioCatalog:
    return load_catalog()


@pytest.fixture
def sample_architecture():
    return ArchitectureResponse.model_validate(SAMPLE_ARCHITECTURE)


@pytest.fixture
def client(test_settings, nvidia_client, discovery_service):
    """Test client for FastAPI app."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_nvidia_client] = lambda: nvidia_client
    app.dependency_overrides[get_discovery_service] = lambda: discovery_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def keyless_client(keyless_settings, upstream):
    """Test client whose NVIDIA client has no API key."""
    keyless = NvidiaClient(keyless_settings, transport=upstream.transport())
    app.dependency_overrides[get_nvidia_client] = lambda: keyless
    app.dependency_overrides[get_discovery_service] = lambda: DiscoveryService(keyless, keyless_settings)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
