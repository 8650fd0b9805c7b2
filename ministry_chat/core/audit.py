"""
Request audit logging for the gateway.

One line per request: method, path, status and duration. Chat failures
are logged at WARNING (caller errors) or ERROR (server errors) so a
misconfigured key or a failing provider stands out in the log.
"""
import logging
import time
from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

from ministry_chat.core.logging_config import get_logger

logger = get_logger(__name__)

RESPONSE_TIME_HEADER = "X-Response-Time"


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


async def audit_request(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """HTTP middleware: time the request and log its outcome."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - started

    # Health probes are frequent; keep them out of the INFO log
    level = logging.DEBUG if request.url.path == "/health" else level_for_status(response.status_code)
    logger.log(
        level,
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.3f}s)"
    )
    response.headers[RESPONSE_TIME_HEADER] = f"{elapsed:.3f}s"
    return response
