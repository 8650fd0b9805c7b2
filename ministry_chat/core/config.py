"""
Configuration management via environment variables.

Values come from the process environment, after python-dotenv has loaded
the nearest .env file found from the working directory upwards.

The Gemini API key is optional at load time: a missing key is reported
on each chat request as a server misconfiguration instead of preventing
the application from starting.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv


load_dotenv(find_dotenv(usecwd=True))


DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_CHAT_API_URL = "http://127.0.0.1:8000/api/chat"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity
        log_dir: Directory for the daily log file; None logs to console only
        gemini_api_key: API key for Google Gemini (empty when not configured)
        gemini_model: Gemini model identifier
        chat_api_url: Gateway endpoint used by the conversation client
        cors_origins: Browser origins allowed to POST to the gateway
        enable_audit_logging: Log every request with its status and duration
    """
    app_name: str
    app_env: str
    log_level: str
    log_dir: Optional[Path]

    gemini_api_key: str
    gemini_model: str

    chat_api_url: str

    cors_origins: Tuple[str, ...]
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def has_api_key(self) -> bool:
        """Check whether the Gemini credential is present."""
        return bool(self.gemini_api_key.strip())


def _parse_log_dir(value: str) -> Optional[Path]:
    # LOG_DIR="" turns file logging off
    if not value.strip():
        return None
    return Path(value).expanduser().resolve()


def _parse_origins(value: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; call get_settings.cache_clear() to reload
    them after changing the environment.
    """
    env = os.environ
    return Settings(
        app_name=env.get("APP_NAME", "MinistryChatGateway"),
        app_env=env.get("APP_ENV", "development"),
        log_level=env.get("LOG_LEVEL", "INFO"),
        log_dir=_parse_log_dir(env.get("LOG_DIR", str(Path.cwd() / "logs"))),
        gemini_api_key=env.get("GEMINI_API_KEY", ""),
        gemini_model=env.get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        chat_api_url=env.get("CHAT_API_URL", DEFAULT_CHAT_API_URL),
        cors_origins=_parse_origins(env.get("CORS_ORIGINS", "")),
        enable_audit_logging=env.get("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
    )
