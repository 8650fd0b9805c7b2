"""
Request and Response models for the Chat API.

These Pydantic models define the contract between the conversation
client and the gateway. Optional fields are filled with their defaults
here, at the deserialization boundary, so the service layer always sees
complete objects.
"""
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """The two conversational roles the gateway understands."""
    USER = "user"
    ASSISTANT = "assistant"

    @classmethod
    def normalize(cls, value: Any) -> "MessageRole":
        """Map any raw role to USER only when it is exactly "user"."""
        return cls.USER if value == cls.USER.value else cls.ASSISTANT


class SourceType(str, Enum):
    YOUTUBE = "youtube"
    AUDIO = "audio"


class Message(BaseModel):
    """
    One turn of a conversation.

    Attributes:
        role: Who produced the turn. Unrecognized roles become ASSISTANT.
        content: The turn's text.
    """
    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(
        default=MessageRole.ASSISTANT,
        description="'user' or 'assistant'; any other value is treated as 'assistant'"
    )
    content: str = Field(..., description="Message text")

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> MessageRole:
        return MessageRole.normalize(value)


class ChatRequest(BaseModel):
    """
    Request model for the /api/chat endpoint.

    Attributes:
        prompt: The user's new message. Emptiness is checked by the route.
        history: Prior turns, oldest first.
    """
    prompt: str = Field(
        default="",
        description="The user's new message",
        examples=["What did he teach about faith?"]
    )
    history: List[Message] = Field(
        default_factory=list,
        description="Prior conversation turns, oldest first"
    )

    @field_validator("prompt", mode="before")
    @classmethod
    def _default_prompt(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("history", mode="before")
    @classmethod
    def _default_history(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class SourceReference(BaseModel):
    """A citation extracted from the assistant's reply."""
    title: str
    uri: str
    type: SourceType


class ChatResponse(BaseModel):
    """
    Response model for the /api/chat endpoint.

    `text` is the model reply exactly as received; `sources` holds at most
    one YouTube entry followed by at most one audio entry.
    """
    text: str = Field(..., description="The assistant's full reply")
    sources: List[SourceReference] = Field(
        default_factory=list,
        description="Citations found in the reply"
    )


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    model: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    details: Optional[str] = None
