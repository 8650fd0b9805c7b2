"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for the chat endpoint
- Response models: Output formatting for API responses
"""
from ministry_chat.models.chat import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    HealthResponse,
    Message,
    MessageRole,
    SourceReference,
    SourceType,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
    "Message",
    "MessageRole",
    "SourceReference",
    "SourceType",
]
