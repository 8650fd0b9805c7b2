"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance:
1. Logging initialization
2. Middleware configuration (audit logging, CORS)
3. Exception handlers rendering every failure as {"error", "details"}
4. Router registration

Run with: uvicorn ministry_chat.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ministry_chat import __version__
from ministry_chat.api.routes import chat_router, health_router
from ministry_chat.core.audit import audit_request
from ministry_chat.core.config import Settings, get_settings
from ministry_chat.core.exceptions import GatewayError, InternalError
from ministry_chat.core.logging_config import get_logger, setup_logging


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"Gemini model: {settings.gemini_model}")
    if not settings.has_api_key():
        logger.warning("GEMINI_API_KEY is not set; chat requests will fail with 500")

    yield

    logger.info(f"Shutting down {settings.app_name}")


# ============================================================
# Exception Handlers
# ============================================================

async def gateway_error_handler(request: Request, exc: GatewayError):
    """Handle all custom gateway exceptions."""
    logger.warning(f"{exc.error_code}: {exc.message} ({request.method} {request.url.path})")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render router errors such as 404 and 405 in the gateway's error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions globally."""
    logger.exception(f"Unhandled exception: {exc}")
    error = InternalError(details=str(exc))
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


# ============================================================
# Application Factory
# ============================================================

def create_app(app_settings: Settings) -> FastAPI:
    """
    Build the gateway application.

    CORS is only installed when CORS_ORIGINS lists browser origins. In
    that case preflight OPTIONS requests from those origins are answered
    by the CORS middleware; every other non-POST request to /api/chat
    gets 405.
    """
    application = FastAPI(
        title="Ministry Chat Gateway",
        description="""
        A chat gateway that restricts a Gemini model to the teachings of
        Apostle Femi Lazarus and the Sphere of Light / Light Nation ministry.

        Every reply ends with a recommended sermon; its YouTube and audio
        links are returned as structured `sources`.
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if app_settings.enable_audit_logging:
        application.middleware("http")(audit_request)
        logger.info("Audit logging enabled")

    if app_settings.cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.cors_origins),
            allow_methods=["POST"],
            allow_headers=["Content-Type"],
        )
        logger.info(f"CORS enabled for: {', '.join(app_settings.cors_origins)}")

    application.add_exception_handler(GatewayError, gateway_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, global_exception_handler)

    application.include_router(health_router)
    application.include_router(chat_router)

    return application


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ministry_chat.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development()
    )
