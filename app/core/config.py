"""
Configuration settings for the user service.
"""
from typing import Any

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

# Level names understood by both loguru and uvicorn
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings.
    """
    PROJECT_NAME: str = "user-service"
    VERSION: str = "1.0.0"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT

    # Logging
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    @field_validator("PORT", mode="before")
    def coerce_port(cls, v: Any) -> int:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PORT
        try:
            port = int(v)
        except (TypeError, ValueError):
            logger.warning(f"Invalid PORT value {v!r}, using {DEFAULT_PORT}")
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            logger.warning(f"PORT {port} is out of range, using {DEFAULT_PORT}")
            return DEFAULT_PORT
        return port

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any) -> str:
        level = "" if v is None else str(v).strip().upper()
        if not level:
            return DEFAULT_LOG_LEVEL
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown LOG_LEVEL {v!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
