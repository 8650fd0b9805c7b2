"""
API Routes module - Endpoint definitions.

- chat.py   : Conversational endpoint
- health.py : Health check endpoint
"""
from ministry_chat.api.routes.chat import router as chat_router
from ministry_chat.api.routes.health import router as health_router

__all__ = [
    "chat_router",
    "health_router",
]
