"""
Application settings.

Values come from environment variables prefixed with COMPOUNDING_ (or a local
.env file), e.g. COMPOUNDING_LOG_LEVEL=DEBUG.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMPOUNDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    SERVICE_NAME: str = "compounding-calculator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 5000

    # Vite dev server of the browser form
    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )

    SCHEDULE_STEP_MONTHS: int = Field(12, ge=1)
    MAX_SCHEDULE_POINTS: int = Field(1200, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
