"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- Orchestrate between the LLM client and citation extraction
"""
from ministry_chat.services.chat_service import ChatService
from ministry_chat.services.citations import extract_sources

__all__ = [
    "ChatService",
    "extract_sources",
]
