"""
Ministry chat gateway package.

Packages are organized by responsibility:
- api/      : FastAPI app and routes
- core/     : Configuration, logging, errors, middleware
- services/ : Chat orchestration and citation extraction
- llm/      : Gemini client and the system instruction
- models/   : Pydantic request/response schemas
- client/   : HTTP client for the chat endpoint
"""
__version__ = "0.1.0"
