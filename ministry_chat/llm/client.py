"""
LLM Client for Google Gemini integration.

This module wraps the google-generativeai chat API:
- Client configuration from Settings
- History conversion to Gemini's two-role vocabulary
- A single, non-streamed chat turn per request
- Error wrapping into LLMError

No retry or fallback is attempted; a failed call is reported as is.
"""
from typing import Dict, List, Optional, Sequence

import google.generativeai as genai

from ministry_chat.core.config import Settings, get_settings
from ministry_chat.core.exceptions import LLMError
from ministry_chat.core.logging_config import get_logger
from ministry_chat.llm.prompts import SYSTEM_INSTRUCTION
from ministry_chat.models.chat import Message, MessageRole

logger = get_logger(__name__)

GEMINI_USER_ROLE = "user"
GEMINI_MODEL_ROLE = "model"


def to_provider_role(role: MessageRole) -> str:
    """Map a conversation role onto Gemini's 'user'/'model' roles."""
    return GEMINI_USER_ROLE if role is MessageRole.USER else GEMINI_MODEL_ROLE


def build_history(history: Sequence[Message]) -> List[Dict[str, object]]:
    """Convert prior turns to Gemini chat history, preserving order."""
    return [
        {"role": to_provider_role(msg.role), "parts": [msg.content]}
        for msg in history
    ]


class GeminiClient:
    """
    Client for the Gemini chat API.

    Every call starts a fresh chat session seeded with the caller's
    history and the fixed system instruction.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.model_name = self.settings.gemini_model
        self.system_instruction = SYSTEM_INSTRUCTION

        genai.configure(api_key=self.settings.gemini_api_key)

        logger.info(f"Gemini client initialized (model={self.model_name})")

    async def generate(self, prompt: str, history: Sequence[Message] = ()) -> str:
        """
        Send one user turn and return the full reply text.

        Args:
            prompt: The new user message
            history: Prior turns, oldest first

        Returns:
            The model's reply text

        Raises:
            LLMError: If the provider call fails for any reason
        """
        try:
            model = genai.GenerativeModel(
                model_name=self.model_name,
                system_instruction=self.system_instruction
            )
            chat = model.start_chat(history=build_history(history))
            response = await chat.send_message_async(prompt)
            return response.text
        except Exception as e:
            logger.error(f"Gemini request failed ({self.model_name}): {e}")
            raise LLMError(details=str(e)) from e
