"""
Shared fixtures for the test suite.

Key design decisions:
- Uses respx to mock all OpenAI API calls (no real HTTP).
- Every test starts with a fake API key in the environment and fresh settings.
"""
import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from menubot.config import get_settings

OPENAI_BASE = "https://api.openai.com"
RELAY_BASE = "http://relay.test"
TEST_API_KEY = "sk-test-0123456789abcdef"

REPLY_TEXT = "How about a warm bowl of kimchi stew tonight?"


def completion_payload(content: str = REPLY_TEXT) -> dict:
    """A minimal chat.completion body as returned by OpenAI."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


# ── Environment ──


@pytest.fixture(autouse=True)
def relay_env(monkeypatch):
    """Fake credential + default endpoint; settings cache rebuilt per test."""
    monkeypatch.setenv("OPENAI_API_KEY", TEST_API_KEY)
    monkeypatch.delenv("VITE_OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_URL", raising=False)
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    monkeypatch.delenv("OPENAI_TEMPERATURE", raising=False)
    monkeypatch.delenv("OPENAI_MAX_TOKENS", raising=False)
    monkeypatch.delenv("OPENAI_TIMEOUT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("VITE_OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()


# ── respx mock setup ──


@pytest.fixture
def openai_api():
    """Intercept calls to api.openai.com; the completions route answers with REPLY_TEXT."""
    with respx.mock(base_url=OPENAI_BASE, assert_all_called=False) as router:
        router.post("/v1/chat/completions", name="completions").mock(
            return_value=httpx.Response(200, json=completion_payload())
        )
        yield router


@pytest.fixture
def relay_api():
    """Intercept calls the chat client makes to the relay."""
    with respx.mock(base_url=RELAY_BASE, assert_all_called=False) as router:
        yield router


# ── FastAPI app ──


@pytest.fixture
def client(openai_api):
    """TestClient with the lifespan running, so the completion client exists."""
    from menubot.main import app

    with TestClient(app) as test_client:
        yield test_client
