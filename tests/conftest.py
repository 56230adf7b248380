import pytest


@pytest.fixture(autouse=True)
def no_provider(settings):
    """Keep tests offline unless a test configures a key explicitly."""
    settings.GEMINI_API_KEYS = []


@pytest.fixture
def provider_key(settings):
    settings.GEMINI_API_KEYS = ["test-key"]
    return "test-key"
