"""
LLM module - Language model integration.

This module handles all LLM interactions:
- The fixed system instruction
- API calls to Gemini
- Role mapping for conversation history
"""
from ministry_chat.llm.client import GeminiClient, build_history, to_provider_role

__all__ = [
    "GeminiClient",
    "build_history",
    "to_provider_role",
]
