"""
Chat Service - Business logic for a single chat turn.

This service orchestrates the chat flow:
1. Receives a validated ChatRequest
2. Calls Gemini with the request's history and the system instruction
3. Extracts citations from the reply
4. Returns the reply text unchanged alongside the citations

No conversation state is kept between requests.
"""
from typing import Optional

from ministry_chat.core.logging_config import get_logger
from ministry_chat.llm.client import GeminiClient
from ministry_chat.models.chat import ChatRequest, ChatResponse
from ministry_chat.services.citations import extract_sources

logger = get_logger(__name__)


class ChatService:
    """
    Service for handling one chat turn.

    Example:
        >>> service = ChatService()
        >>> response = await service.process_message(
        ...     ChatRequest(prompt="What did he teach about faith?")
        ... )
        >>> response.sources
        [SourceReference(title='Watch on YouTube', ...), ...]
    """

    def __init__(self, llm_client: Optional[GeminiClient] = None):
        """
        Initialize the chat service.

        Args:
            llm_client: Optional GeminiClient. Built from settings if not provided.
        """
        self.llm_client = llm_client or GeminiClient()
        logger.info("ChatService initialized")

    async def process_message(self, request: ChatRequest) -> ChatResponse:
        """
        Send the request to Gemini and post-process the reply.

        Raises:
            LLMError: If the Gemini call fails.
        """
        logger.info(
            f"Processing message: prompt_length={len(request.prompt)}, "
            f"history_size={len(request.history)}"
        )

        text = await self.llm_client.generate(request.prompt, request.history)
        sources = extract_sources(text)

        logger.info(
            f"Message processed: response_length={len(text)}, "
            f"sources={[s.type.value for s in sources]}"
        )

        return ChatResponse(text=text, sources=sources)
