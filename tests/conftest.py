"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from slidecraft.core import Settings


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    env_vars = [
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_DEPLOYMENT",
        "AZURE_OPENAI_USE_MANAGED_IDENTITY",
        "LOCALE",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def demo_settings():
    """Settings with no AI model configured."""
    return Settings(
        _env_file=None,
        locale="it",
        azure_openai_api_key=None,
        azure_openai_endpoint=None,
        azure_openai_use_managed_identity=False,
    )


@pytest.fixture
def ai_settings():
    """Settings with Azure OpenAI configured."""
    return Settings(
        _env_file=None,
        locale="it",
        azure_openai_api_key="test-key",
        azure_openai_endpoint="https://test.openai.azure.com/",
        azure_openai_deployment="gpt-4o-mini",
    )


@pytest.fixture
def app(demo_settings):
    """Application wired to demo-mode generation and a fresh repository."""
    from slidecraft.api.deps import get_generation_service, get_repository
    from slidecraft.main import create_app
    from slidecraft.services.generation import SlideGenerationService
    from slidecraft.services.storage import InMemoryPresentationRepository

    app = create_app()
    repository = InMemoryPresentationRepository()
    service = SlideGenerationService(settings=demo_settings)
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_generation_service] = lambda: service
    app.state.test_repository = repository
    return app


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Identity headers for the default test user."""
    return {"X-User-Id": "user-1"}
