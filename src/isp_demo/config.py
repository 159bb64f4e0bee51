"""Application Configuration

Type-safe configuration using Pydantic Settings for environment variable handling.
Every field has a default, so the demo runs with no environment at all; a
.env file or real environment variables override them.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # =============================================================================
    # APPLICATION
    # =============================================================================

    app_name: str = Field(default="isp-demo", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # =============================================================================
    # LOGGING
    # =============================================================================

    log_level: LogLevel = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> Any:
        """Accept level names in any case ('info' -> 'INFO')."""
        return v.strip().upper() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.model_validate({})


__all__ = ["LogLevel", "Settings", "get_settings"]
