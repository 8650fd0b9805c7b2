"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request parsing and validation
- Response formatting
- Error rendering
- Route definitions
"""
from ministry_chat.api.main import app

__all__ = ["app"]
