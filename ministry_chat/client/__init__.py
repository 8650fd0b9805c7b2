"""
Client module - HTTP access to the chat gateway.
"""
from ministry_chat.client.conversation import (
    NO_RESPONSE_TEXT,
    BackendError,
    ConversationClient,
)

__all__ = [
    "NO_RESPONSE_TEXT",
    "BackendError",
    "ConversationClient",
]
