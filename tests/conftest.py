import os
from dataclasses import replace

import pytest

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_DIR", "")

from fastapi.testclient import TestClient  # noqa: E402

from ministry_chat.api.main import app  # noqa: E402
from ministry_chat.api.routes import chat as chat_routes  # noqa: E402
from ministry_chat.core.config import Settings, get_settings  # noqa: E402
from ministry_chat.services.chat_service import ChatService  # noqa: E402


class FakeLLMClient:
    """Stands in for GeminiClient; records every call."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def generate(self, prompt, history=()):
        self.calls.append({"prompt": prompt, "history": list(history)})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        return replace(get_settings(), **overrides)

    return _make


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def client(monkeypatch, fake_llm, make_settings):
    settings = make_settings(gemini_api_key="test-key")
    monkeypatch.setattr(chat_routes, "get_settings", lambda: settings)
    monkeypatch.setattr(chat_routes, "get_chat_service", lambda: ChatService(llm_client=fake_llm))
    return TestClient(app)
