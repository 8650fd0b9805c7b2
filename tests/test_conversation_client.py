import pytest
import requests

from ministry_chat.client import conversation
from ministry_chat.client.conversation import BackendError, ConversationClient, NO_RESPONSE_TEXT
from ministry_chat.models.chat import Message, SourceType

ENDPOINT = "http://gateway.test/api/chat"


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text="", json_error=False):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self._json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def fake_post(monkeypatch):
    captured = {"response": DummyResponse(200, {"text": "hi", "sources": []})}

    def _post(url, json=None, timeout=None):
        captured["url"] = url
        captured["json"] = json
        captured["timeout"] = timeout
        if isinstance(captured["response"], Exception):
            raise captured["response"]
        return captured["response"]

    monkeypatch.setattr(conversation.requests, "post", _post)
    return captured


def test_send_message_posts_prompt_and_history(fake_post):
    fake_post["response"] = DummyResponse(200, {
        "text": "Answer",
        "sources": [
            {"title": "Watch on YouTube", "uri": "https://a", "type": "youtube"},
            {"title": "Download Audio", "uri": "https://b", "type": "audio"},
        ],
    })
    history = [
        Message(role="user", content="first"),
        {"role": "assistant", "content": "second"},
    ]

    reply = ConversationClient(ENDPOINT).send_message("third", history)

    assert fake_post["url"] == ENDPOINT
    assert fake_post["json"] == {
        "prompt": "third",
        "history": [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "second"},
        ],
    }
    assert reply.text == "Answer"
    assert [s.type for s in reply.sources] == [SourceType.YOUTUBE, SourceType.AUDIO]


def test_missing_fields_get_defaults(fake_post):
    fake_post["response"] = DummyResponse(200, {})
    reply = ConversationClient(ENDPOINT).send_message("q", [])
    assert reply.text == NO_RESPONSE_TEXT
    assert reply.sources == []


def test_error_message_contains_status_and_error_field(fake_post):
    fake_post["response"] = DummyResponse(503, {"error": "X"})
    with pytest.raises(BackendError) as excinfo:
        ConversationClient(ENDPOINT).send_message("q", [])
    assert "503" in str(excinfo.value)
    assert "X" in str(excinfo.value)
    assert excinfo.value.status_code == 503


def test_error_falls_back_to_details(fake_post):
    fake_post["response"] = DummyResponse(500, {"details": "quota exceeded"})
    with pytest.raises(BackendError, match=r"Backend error \(500\): quota exceeded"):
        ConversationClient(ENDPOINT).send_message("q", [])


def test_error_falls_back_to_serialized_json(fake_post):
    fake_post["response"] = DummyResponse(502, {"message": "bad gateway"})
    with pytest.raises(BackendError) as excinfo:
        ConversationClient(ENDPOINT).send_message("q", [])
    assert excinfo.value.detail == '{"message":"bad gateway"}'


def test_error_falls_back_to_raw_text(fake_post):
    fake_post["response"] = DummyResponse(504, text="Gateway Timeout", json_error=True)
    with pytest.raises(BackendError, match=r"Backend error \(504\): Gateway Timeout"):
        ConversationClient(ENDPOINT).send_message("q", [])


def test_error_without_any_detail(fake_post):
    fake_post["response"] = DummyResponse(502, text="", json_error=True)
    with pytest.raises(BackendError) as excinfo:
        ConversationClient(ENDPOINT).send_message("q", [])
    assert str(excinfo.value) == "Backend error (502)"


def test_transport_error_propagates(fake_post):
    fake_post["response"] = requests.ConnectionError("connection refused")
    with pytest.raises(requests.ConnectionError):
        ConversationClient(ENDPOINT).send_message("q", [])


def test_unparseable_success_body_raises(fake_post):
    fake_post["response"] = DummyResponse(200, text="<html>", json_error=True)
    with pytest.raises(ValueError):
        ConversationClient(ENDPOINT).send_message("q", [])


def test_endpoint_defaults_to_settings(monkeypatch, make_settings):
    settings = make_settings(chat_api_url="http://configured/api/chat")
    monkeypatch.setattr(conversation, "get_settings", lambda: settings)
    assert ConversationClient().endpoint == "http://configured/api/chat"
