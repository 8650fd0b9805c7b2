"""
Prompts module - LLM prompt templates.

The system instruction is a fixed constant shared by every request.
"""
from ministry_chat.llm.prompts.ministry_prompts import (
    REFUSAL_MESSAGE,
    SYSTEM_INSTRUCTION,
)

__all__ = [
    "REFUSAL_MESSAGE",
    "SYSTEM_INSTRUCTION",
]
