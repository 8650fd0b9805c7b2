"""
Custom Exceptions - Gateway error classes.

Every exception carries the HTTP status code and the human-readable
`error` text sent back to the caller. The API layer renders them with
`to_dict()` so each failure returns the same JSON shape:

    {"error": "...", "details": "..."}
"""
from typing import Optional


class GatewayError(Exception):
    """
    Base exception for all gateway errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict, omitting empty details."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ConfigurationError(GatewayError):
    """Raised when the Gemini credential is missing."""
    status_code = 500
    error_code = "configuration_error"

    def __init__(self, message: str = "GEMINI_API_KEY is not configured on the server."):
        super().__init__(message)


class InvalidRequestError(GatewayError):
    """Raised when the request body is malformed or incomplete."""
    status_code = 400
    error_code = "invalid_request"


class InternalError(GatewayError):
    """Raised for any unexpected failure while handling a chat turn."""
    status_code = 500
    error_code = "internal_error"

    def __init__(self, details: Optional[str] = None):
        super().__init__("Internal Server Error", details=details)


class LLMError(InternalError):
    """Raised when the Gemini call fails for any reason."""
    error_code = "llm_error"
