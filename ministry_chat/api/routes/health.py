"""
Health Check Routes - Service status endpoint.

Used by load balancers and monitoring. The check does not call Gemini.
"""
from datetime import datetime

from fastapi import APIRouter

from ministry_chat import __version__
from ministry_chat.core.config import get_settings
from ministry_chat.core.logging_config import get_logger
from ministry_chat.models.chat import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Report that the API is running and which model it talks to."""
    logger.debug("Health check requested")

    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=__version__,
        model=settings.gemini_model,
        timestamp=datetime.utcnow()
    )
