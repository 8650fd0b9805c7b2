"""
Chat Routes - API endpoint for conversational interactions.

POST /api/chat checks, in order:
1. The Gemini credential is configured
2. The body parses into a ChatRequest
3. The prompt is not blank

and only then calls Gemini. Other HTTP methods are rejected by the
router with 405 before any of this runs.
"""
from fastapi import APIRouter, Request
from pydantic import ValidationError

from ministry_chat.core.config import get_settings
from ministry_chat.core.exceptions import (
    ConfigurationError,
    GatewayError,
    InternalError,
    InvalidRequestError,
)
from ministry_chat.core.logging_config import get_logger
from ministry_chat.models.chat import ChatRequest, ChatResponse, ErrorResponse
from ministry_chat.services.chat_service import ChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed body or empty prompt"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Misconfiguration or provider failure"}
    }
)

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


def parse_chat_request(raw_body: bytes) -> ChatRequest:
    """
    Parse a raw request body into a ChatRequest.

    An empty body is treated as an empty JSON object.

    Raises:
        InvalidRequestError: If the body is not valid JSON or does not
            fit the request schema.
    """
    if not raw_body.strip():
        return ChatRequest()
    try:
        return ChatRequest.model_validate_json(raw_body)
    except ValidationError as e:
        raise InvalidRequestError("Invalid JSON body", details=str(e)) from e


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Ask the ministry assistant a question",
    description="""
    Send a new prompt plus the prior conversation turns.

    The reply text is returned exactly as produced by the model, together
    with the YouTube and audio links found in its citation block.
    """
)
async def send_message(request: Request) -> ChatResponse:
    """Process one chat turn."""
    settings = get_settings()
    if not settings.has_api_key():
        logger.error("Chat request rejected: GEMINI_API_KEY is not configured")
        raise ConfigurationError()

    chat_request = parse_chat_request(await request.body())

    if not chat_request.prompt.strip():
        raise InvalidRequestError("Prompt is required.")

    try:
        return await get_chat_service().process_message(chat_request)
    except GatewayError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        raise InternalError(details=str(e)) from e
