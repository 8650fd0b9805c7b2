"""
Conversation Client - HTTP client for the chat gateway.

Sends a prompt plus prior turns to POST /api/chat and returns the
gateway's ChatResponse. Failures are logged and raised to the caller;
nothing is retried.
"""
import json
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import requests

from ministry_chat.core.config import get_settings
from ministry_chat.core.logging_config import get_logger
from ministry_chat.models.chat import ChatResponse, Message

logger = get_logger(__name__)

NO_RESPONSE_TEXT = "No response received."

HistoryEntry = Union[Message, Mapping[str, Any]]


class BackendError(Exception):
    """
    Raised when the gateway answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the gateway
        detail: Diagnostic text recovered from the response body (may be empty)
    """

    def __init__(self, status_code: int, detail: str = ""):
        message = (
            f"Backend error ({status_code}): {detail}"
            if detail
            else f"Backend error ({status_code})"
        )
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def serialize_history(history: Sequence[HistoryEntry]) -> List[Dict[str, Any]]:
    """Turn Message models or plain dicts into JSON-ready turns, keeping order."""
    turns = []
    for entry in history:
        if isinstance(entry, Message):
            turns.append(entry.model_dump(mode="json"))
        else:
            turns.append({"role": entry.get("role"), "content": entry.get("content")})
    return turns


def read_error_detail(response: requests.Response) -> str:
    """
    Recover a diagnostic message from an error response.

    Tries the JSON `error` field, then `details`, then the whole JSON
    document, then the raw body text. Returns "" if nothing is readable.
    """
    try:
        payload = response.json()
    except ValueError:
        try:
            return response.text or ""
        except Exception:
            return ""

    if isinstance(payload, dict) and (payload.get("error") or payload.get("details")):
        return str(payload.get("error") or payload.get("details"))
    return json.dumps(payload, separators=(",", ":"))


class ConversationClient:
    """
    Client for the gateway's chat endpoint.

    Example:
        >>> client = ConversationClient("http://127.0.0.1:8000/api/chat")
        >>> reply = client.send_message("What did he teach about faith?", [])
        >>> reply.text
    """

    def __init__(self, endpoint: Optional[str] = None, timeout: float = 120):
        self.endpoint = endpoint or get_settings().chat_api_url
        self.timeout = timeout

    def send_message(self, prompt: str, history: Sequence[HistoryEntry] = ()) -> ChatResponse:
        """
        Send one chat turn to the gateway.

        Args:
            prompt: The user's new message
            history: Prior turns, oldest first

        Returns:
            ChatResponse with the reply text and any citations

        Raises:
            BackendError: If the gateway returns a non-success status
            requests.RequestException: If the gateway cannot be reached
            ValueError: If a success response is not valid JSON
        """
        try:
            response = requests.post(
                self.endpoint,
                json={"prompt": prompt, "history": serialize_history(history)},
                timeout=self.timeout
            )

            if not response.ok:
                raise BackendError(response.status_code, read_error_detail(response))

            data = response.json()
            if not isinstance(data, dict):
                data = {}
            return ChatResponse(
                text=data.get("text") or NO_RESPONSE_TEXT,
                sources=data.get("sources") or []
            )
        except (BackendError, requests.RequestException, ValueError) as e:
            logger.error(f"Backend API Error: {e}")
            raise
